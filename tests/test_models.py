"""Tests for Pydantic models."""

from typing import Any

import pytest
from pydantic import ValidationError

from kubevirt_validations.models import (
    EntityMetadata,
    ValidationResult,
    ValidationType,
    VmLikeEntity,
)


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_defaults(self) -> None:
        """Test result type defaults to error."""
        result = ValidationResult(message="Value is required")
        assert result.type == ValidationType.ERROR
        assert result.is_error
        assert str(result) == "Value is required"

    def test_type_from_string(self) -> None:
        """Test type is coerced from its string value."""
        result = ValidationResult(message="hint", type="info")
        assert result.type == ValidationType.INFO
        assert not result.is_error

    def test_invalid_type(self) -> None:
        """Test unknown types are rejected."""
        with pytest.raises(ValidationError):
            ValidationResult(message="oops", type="fatal")

    def test_frozen(self) -> None:
        """Test results are immutable."""
        result = ValidationResult(message="Value is required")
        with pytest.raises(ValidationError):
            result.message = "changed"  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test equal results collapse in a set."""
        results = {ValidationResult(message="a"), ValidationResult(message="a")}
        assert len(results) == 1


class TestVmLikeEntity:
    """Tests for VmLikeEntity model."""

    def test_from_kubernetes_object(self, vm1: dict[str, Any]) -> None:
        """Test building an entity from a raw Kubernetes object."""
        entity = VmLikeEntity.model_validate(vm1)
        assert entity.kind == "VirtualMachine"
        assert entity.name == "vm1"
        assert entity.namespace == "test-namespace"

    def test_extra_fields_ignored(self) -> None:
        """Test unknown metadata fields are dropped."""
        entity = VmLikeEntity.model_validate(
            {"metadata": {"name": "vm1", "uid": "1234", "labels": {"app": "x"}}}
        )
        assert entity.kind is None
        assert entity.namespace is None

    def test_is_named(self, vm1: dict[str, Any]) -> None:
        """Test name matching is scoped to a namespace."""
        entity = VmLikeEntity.model_validate(vm1)
        assert entity.is_named("vm1", "test-namespace")
        assert not entity.is_named("vm1", "default")
        assert not entity.is_named("vm2", "test-namespace")

    def test_missing_metadata(self) -> None:
        """Test objects without metadata are rejected."""
        with pytest.raises(ValidationError):
            VmLikeEntity.model_validate({"kind": "VirtualMachine"})

    def test_empty_name(self) -> None:
        """Test empty names are rejected."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            EntityMetadata(name="")
