"""
Compliance module for the RWA SDK.

This module handles registering, updating and removing compliance modules:
pluggable on-chain rules the compliance contract evaluates before a token
transfer is allowed.
"""
from ..models import ExecutionResult
from .messages import AddComplianceModule, RemoveComplianceModule, UpdateComplianceModule
from .request import ComplianceModuleRequest

__all__ = ['ComplianceOperations', 'ComplianceModuleRequest']


class ComplianceOperations:
    """
    Compliance contract operations, mixed into :class:`rwa_sdk.RwaClient`.
    """

    def add_compliance_module(self, module_name: str, request: ComplianceModuleRequest) -> ExecutionResult:
        """
        Register a compliance module.

        Args:
            module_name: Human-readable module name (e.g. "Country Restriction")
            request: Sender, module address, signer and gas limit
        """
        msg = AddComplianceModule(module_addr=request.module_addr, module_name=module_name)
        return self._execute(request, msg, self.compliance_address)

    def remove_compliance_module(self, request: ComplianceModuleRequest) -> ExecutionResult:
        msg = RemoveComplianceModule(module_addr=request.module_addr)
        return self._execute(request, msg, self.compliance_address)

    def update_compliance_module(self, request: ComplianceModuleRequest, active: bool) -> ExecutionResult:
        """
        Activate or deactivate a compliance module.

        Args:
            request: Sender, module address, signer and gas limit
            active: Whether the module should be enforced
        """
        msg = UpdateComplianceModule(module_addr=request.module_addr, active=active)
        return self._execute(request, msg, self.compliance_address)
