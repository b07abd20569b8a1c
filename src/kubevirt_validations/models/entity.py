"""Models for existing VM-like entities used in name uniqueness checks."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntityMetadata(BaseModel):
    """The part of Kubernetes object metadata the validators care about."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(description="Object name")
    namespace: str | None = Field(None, description="Object namespace")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty names."""
        if not v:
            raise ValueError("Entity name cannot be empty")
        return v


class VmLikeEntity(BaseModel):
    """A virtual machine, VM template or anything else named like one.

    Built from raw Kubernetes objects (``kubectl get vm -o json`` items);
    fields other than ``kind`` and ``metadata`` are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    kind: str | None = Field(None, description="Object kind (e.g., VirtualMachine)")
    metadata: EntityMetadata = Field(description="Object metadata")

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str | None:
        return self.metadata.namespace

    def is_named(self, name: str, namespace: str | None) -> bool:
        """Check whether this entity occupies ``name`` in ``namespace``."""
        return self.metadata.name == name and self.metadata.namespace == namespace
