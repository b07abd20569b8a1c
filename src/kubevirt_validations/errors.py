"""Error collection and reporting for kubevirt-validations.

This module provides utilities for running several validators over a set of
fields and reporting every failure at the end, instead of stopping at the
first invalid field.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from kubevirt_validations.models import ValidationResult

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for collected validation issues."""

    ERROR = "error"  # Blocks the form, counted by has_errors
    WARNING = "warning"  # Reported, doesn't block the form
    INFO = "info"  # Logged at debug level only

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationSeverity":
        """Map a validation result type to its severity."""
        return cls(result.type.value)


class InvalidValueError(ValueError):
    """Raised when a validation result has to be turned into an exception.

    Attributes:
        result: The validation result that caused the error
    """

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.message)
        self.result = result


def raise_for_result(result: ValidationResult | None) -> None:
    """Raise InvalidValueError for an error-level result.

    Lets validators be used inside pydantic ``field_validator`` methods.
    Warnings and infos do not raise.

    Raises:
        InvalidValueError: If ``result`` is an error
    """
    if result is not None and result.is_error:
        raise InvalidValueError(result)


@dataclass
class FieldError:
    """A validation failure attached to a form field.

    Attributes:
        field: Name of the validated field (e.g., "name")
        result: Result returned by the validator
    """

    field: str
    result: ValidationResult

    @property
    def severity(self) -> ValidationSeverity:
        return ValidationSeverity.from_result(self.result)

    def __str__(self) -> str:
        """Format error for logging."""
        return f"[{self.field}] {self.result.message}"


class ValidationCollector:
    """Collects validation failures for batch reporting.

    Validators are run through ``check`` so that every field is validated,
    collecting all failures for reporting at the end.
    """

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self.errors: list[FieldError] = []

    def add(self, field: str, result: ValidationResult) -> None:
        """Add a validation result to the collection.

        Args:
            field: Field the result belongs to
            result: Validation result to record
        """
        error = FieldError(field=field, result=result)
        self.errors.append(error)

        # Log immediately at appropriate level
        severity = ValidationSeverity.from_result(result)
        if severity == ValidationSeverity.ERROR:
            logger.error("%s", error)
        elif severity == ValidationSeverity.WARNING:
            logger.warning("%s", error)
        else:
            logger.debug("%s", error)

    def check(
        self,
        field: str,
        validator: Callable[..., ValidationResult | None],
        value: Any,
        *args: Any,
        **kwargs: Any,
    ) -> ValidationResult | None:
        """Run a validator and record its result if it failed.

        Args:
            field: Field being validated
            validator: Validator function returning a result or None
            value: Raw field value
            *args: Extra context passed to the validator
            **kwargs: Extra keyword context passed to the validator

        Returns:
            Whatever the validator returned
        """
        result = validator(value, *args, **kwargs)
        if result is not None:
            self.add(field, result)
        return result

    def has_errors(self) -> bool:
        """Check if any errors have been collected.

        Returns:
            True if any ERROR-level results exist (warnings don't count)
        """
        return any(e.severity == ValidationSeverity.ERROR for e in self.errors)

    def has_warnings(self) -> bool:
        """Check if any warnings have been collected."""
        return any(e.severity == ValidationSeverity.WARNING for e in self.errors)

    def get_error_count(self) -> int:
        """Get count of ERROR-level results."""
        return sum(1 for e in self.errors if e.severity == ValidationSeverity.ERROR)

    def get_warning_count(self) -> int:
        """Get count of WARNING-level results."""
        return sum(1 for e in self.errors if e.severity == ValidationSeverity.WARNING)

    def first_error(self, field: str) -> ValidationResult | None:
        """Return the first result recorded for ``field``, if any."""
        for error in self.errors:
            if error.field == field:
                return error.result
        return None

    def log_summary(self) -> None:
        """Log a summary of all collected results grouped by field."""
        if not self.errors:
            logger.info("Validation completed with no errors")
            return

        error_count = self.get_error_count()
        warning_count = self.get_warning_count()

        # Group results by field
        errors_by_field: dict[str, list[FieldError]] = {}
        for error in self.errors:
            errors_by_field.setdefault(error.field, []).append(error)

        for field, field_errors in sorted(errors_by_field.items()):
            logger.info("Field: %s (%d issues)", field, len(field_errors))
            for error in field_errors:
                logger.info("  [%s] %s", error.severity.value.upper(), error.result.message)

        if error_count > 0:
            logger.error(
                "Validation completed with %d error(s) and %d warning(s)",
                error_count,
                warning_count,
            )
        elif warning_count > 0:
            logger.warning("Validation completed with %d warning(s)", warning_count)
