"""Loader for existing VM-like entities.

This module reads the entities a new name is checked against from a JSON or
YAML document, such as the output of ``kubectl get vm -o json``, and converts
them into validated Pydantic models.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from kubevirt_validations.errors import ValidationCollector
from kubevirt_validations.models import ValidationResult, ValidationType, VmLikeEntity

logger = logging.getLogger(__name__)


class EntityLoader:
    """Loader for entity documents.

    Accepts a single object, a list of objects, or a Kubernetes ``List``
    object with an ``items`` array.
    """

    def __init__(
        self,
        path: str | Path,
        error_collector: ValidationCollector | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            path: Path to the JSON or YAML document
            error_collector: Optional collector for malformed items
        """
        self.path = Path(path)
        self.error_collector = error_collector

    def load(self) -> list[VmLikeEntity]:
        """Read the document and return the entities it contains.

        Returns:
            List of validated entities

        Raises:
            FileNotFoundError: If the document does not exist
            ValueError: If the document is malformed, or an item is invalid
                        and no error collector was given
        """
        data = self._read_document()

        items: Any
        if isinstance(data, dict) and "items" in data:
            items = data["items"]
        elif isinstance(data, dict):
            items = [data]
        elif data is None:
            items = []
        else:
            items = data

        if not isinstance(items, list):
            raise ValueError(f"Expected a list of entities in {self.path}")

        entities: list[VmLikeEntity] = []
        for index, item in enumerate(items):
            entity = self._parse_item(index, item)
            if entity is not None:
                entities.append(entity)

        logger.debug("Loaded %d entities from %s", len(entities), self.path)
        return entities

    def _read_document(self) -> Any:
        """Parse the document as JSON or YAML depending on its suffix.

        Raises:
            FileNotFoundError: If the document does not exist
            ValueError: If the document cannot be read or parsed
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Entity file not found: {self.path}")

        try:
            content = self.path.read_text()
        except OSError as e:
            raise ValueError(f"Cannot read {self.path}: {e}") from e

        if self.path.suffix.lower() == ".json":
            try:
                return json.loads(content)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {self.path}: {e}") from e

        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.path}: {e}") from e

    def _parse_item(self, index: int, item: Any) -> VmLikeEntity | None:
        """Validate a single item.

        Returns:
            Validated entity, or None if it was invalid and reported

        Raises:
            ValueError: If the item is invalid (only when error_collector is None)
        """
        try:
            return VmLikeEntity.model_validate(item)
        except ValidationError as e:
            error_msg = f"Invalid entity at index {index} in {self.path}"
            if self.error_collector:
                self.error_collector.add(
                    f"entities[{index}]",
                    ValidationResult(message=f"{error_msg}: {e}", type=ValidationType.WARNING),
                )
                return None
            raise ValueError(f"{error_msg}: {e}") from e


def load_entities(
    path: str | Path,
    error_collector: ValidationCollector | None = None,
) -> list[VmLikeEntity]:
    """Load existing entities from a JSON or YAML document.

    This is a convenience function that creates an EntityLoader and calls load().

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is malformed or contains invalid items
                   (only when error_collector is None)
    """
    loader = EntityLoader(path, error_collector=error_collector)
    return loader.load()
