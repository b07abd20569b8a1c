"""Validation result models."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ValidationType(str, Enum):
    """Kind of message attached to a form field."""

    ERROR = "error"
    """Blocks submission of the form."""

    WARNING = "warning"
    """Shown to the user, submission still allowed."""

    INFO = "info"
    """Informational hint."""


class ValidationResult(BaseModel):
    """Outcome of a failed validation.

    Validators return ``None`` for valid input and an instance of this model
    otherwise. Results compare equal when message and type match.
    """

    model_config = ConfigDict(frozen=True)

    message: Annotated[str, Field(description="User-facing message")]
    type: ValidationType = Field(ValidationType.ERROR, description="Message kind")

    @property
    def is_error(self) -> bool:
        """Whether this result blocks the form."""
        return self.type == ValidationType.ERROR

    def __str__(self) -> str:
        return self.message
