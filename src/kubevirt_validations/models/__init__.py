"""Pydantic models for form validation.

This module provides the validation result shape returned by every validator
and the entity models used to check name uniqueness.
"""

from kubevirt_validations.models.entity import EntityMetadata, VmLikeEntity
from kubevirt_validations.models.validation import ValidationResult, ValidationType

__all__ = [
    # entity
    "EntityMetadata",
    "VmLikeEntity",
    # validation
    "ValidationResult",
    "ValidationType",
]
