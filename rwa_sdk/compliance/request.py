"""
Request structures for compliance operations.
"""
from ..models import SignedRequest


class ComplianceModuleRequest(SignedRequest):
    """Identify a compliance module to add, update or remove"""
    module_addr: str
