"""
RWA SDK - Python client for tokenized real-world-asset contracts on Cosmos chains.
"""
from .client import RwaClient
from .compliance import ComplianceModuleRequest
from .config import NetworkConfig
from .exceptions import (
    DecodeError, EncodingError, ExecutionError, NetworkError, NotFound,
    QueryError, RwaError, SigningError
)
from .identity import (
    AddClaimRequest, AddIdentityRequest, CheckUserForTokenComplianceRequest,
    Claim, GetValidatedClaimsRequest, RemoveClaimRequest, RemoveIdentityRequest,
    UpdateIdentityRequest
)
from .models import AccountInfo, Coin, ContractMsg, Event, ExecutionResult, Fee, SignedRequest
from .signer import Signer, SigningKey
from .token import BalanceResponse, TokenInfoRequest, TokenInfoResponse, TransferMessageRequest
from .version import __version__

__all__ = [
    "RwaClient",
    "NetworkConfig",
    "Signer",
    "SigningKey",
    "AccountInfo",
    "Coin",
    "ContractMsg",
    "Event",
    "ExecutionResult",
    "Fee",
    "SignedRequest",
    "Claim",
    "AddIdentityRequest",
    "UpdateIdentityRequest",
    "RemoveIdentityRequest",
    "AddClaimRequest",
    "RemoveClaimRequest",
    "GetValidatedClaimsRequest",
    "CheckUserForTokenComplianceRequest",
    "ComplianceModuleRequest",
    "TransferMessageRequest",
    "TokenInfoRequest",
    "BalanceResponse",
    "TokenInfoResponse",
    "RwaError",
    "NetworkError",
    "EncodingError",
    "DecodeError",
    "SigningError",
    "ExecutionError",
    "QueryError",
    "NotFound",
    "__version__",
]
