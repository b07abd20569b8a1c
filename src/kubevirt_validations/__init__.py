"""Form field validators for KubeVirt virtual machines."""

from kubevirt_validations.models import ValidationResult, ValidationType
from kubevirt_validations.validations import (
    get_validation_object,
    is_positive_number,
    is_valid_mac,
    validate_bmc_url,
    validate_container,
    validate_dns1123_subdomain_value,
    validate_mac,
    validate_positive_number,
    validate_template_name,
    validate_url,
    validate_vm_like_entity_name,
    validate_vm_name,
    validate_vmware_url,
)

__version__ = "0.1.0"

__all__ = [
    "ValidationResult",
    "ValidationType",
    "get_validation_object",
    "is_positive_number",
    "is_valid_mac",
    "validate_bmc_url",
    "validate_container",
    "validate_dns1123_subdomain_value",
    "validate_mac",
    "validate_positive_number",
    "validate_template_name",
    "validate_url",
    "validate_vm_like_entity_name",
    "validate_vm_name",
    "validate_vmware_url",
    "__version__",
]
