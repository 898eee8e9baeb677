"""
Compliance contract messages.
"""
from typing import ClassVar

from ..models import ContractMsg


class AddComplianceModule(ContractMsg):
    tag: ClassVar[str] = "add_compliance_module"

    module_addr: str
    module_name: str


class RemoveComplianceModule(ContractMsg):
    tag: ClassVar[str] = "remove_compliance_module"

    module_addr: str


class UpdateComplianceModule(ContractMsg):
    tag: ClassVar[str] = "update_compliance_module"

    module_addr: str
    active: bool
