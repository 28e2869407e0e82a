"""
Source configurations for Maplify.

Each source defines:
- url: Endpoint or page URL (a free-text query is appended for GET sources)
- name: Identifier used as the key in match groups (optional)
- isRestAPI: Treat the GET response as JSON instead of HTML (optional)
- query / variables: GraphQL document and variables, both or neither (optional)
- selectors: CSS selectors for HTML sources, "selector@attribute" for attributes (optional)
- itemsPath: Dotted path to the entries array in a JSON payload (optional)
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from maplify.errors import ConfigurationError


class SourceKind(str, Enum):
    """How a source is fetched and extracted."""

    REST = "rest"
    GRAPHQL = "graphql"
    HTML = "html"


@dataclass(frozen=True)
class FieldSelector:
    """A CSS selector with an optional attribute to read instead of text."""

    selector: str
    attribute: str | None = None

    @classmethod
    def parse(cls, value: str) -> "FieldSelector":
        """
        Parse a "selector@attribute" string.

        Only the text between the first and second "@" is taken as the
        attribute, so "a@href@x" reads "href".
        """
        parts = value.split("@")
        attribute = parts[1] if len(parts) > 1 and parts[1] else None
        return cls(selector=parts[0].strip(), attribute=attribute)


class SelectorSet(BaseModel):
    """CSS selectors for an HTML source; extra keys are extra entry fields."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    main_selector: str = Field(default="body", alias="mainSelector")
    title: str | None = None

    @model_validator(mode="after")
    def check_extra_fields(self) -> "SelectorSet":
        for key, value in (self.model_extra or {}).items():
            if value is not None and not isinstance(value, str):
                raise ValueError(f"selector for field '{key}' must be a string")
        return self

    def fields(self) -> dict[str, FieldSelector]:
        """Named field selectors in declaration order, empty ones skipped."""
        raw: dict[str, str | None] = {"title": self.title, **(self.model_extra or {})}
        return {key: FieldSelector.parse(value) for key, value in raw.items() if value}


class SourceConfig(BaseModel):
    """Configuration for one source."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str
    name: str | None = None
    is_rest_api: bool = Field(default=False, alias="isRestAPI")
    query: str | None = None
    variables: dict[str, Any] | str | None = None
    selectors: SelectorSet | None = None
    items_path: str | None = Field(default=None, alias="itemsPath")

    @property
    def has_query(self) -> bool:
        return bool(self.query)

    @property
    def has_variables(self) -> bool:
        # An empty variables object still counts as present
        return self.variables is not None and self.variables != ""

    @property
    def kind(self) -> SourceKind:
        if self.has_query or self.has_variables:
            return SourceKind.GRAPHQL
        if self.is_rest_api:
            return SourceKind.REST
        return SourceKind.HTML

    @property
    def is_api(self) -> bool:
        """Whether the payload is JSON rather than HTML."""
        return self.kind is not SourceKind.HTML

    def identifier(self, index: int) -> str:
        """Key for this source in match groups; index is 0-based."""
        return self.name or f"source{index + 1}"


def load_source_configs(path: Path | str) -> list[SourceConfig]:
    """
    Load a JSON list of source configurations.

    Args:
        path: Path to a JSON file holding a list of source objects

    Returns:
        List of SourceConfig in file order

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read sources file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Sources file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ConfigurationError(f"Sources file {path} must contain a JSON list")

    configs = []
    for position, item in enumerate(raw, start=1):
        try:
            configs.append(SourceConfig.model_validate(item))
        except ValidationError as e:
            raise ConfigurationError(f"Source #{position} in {path} is invalid: {e}") from e

    logger.debug(f"Loaded {len(configs)} source configs from {path}")
    return configs
