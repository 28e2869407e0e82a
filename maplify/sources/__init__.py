"""Source configuration models and loaders."""

from maplify.sources.configs import (
    FieldSelector,
    SelectorSet,
    SourceConfig,
    SourceKind,
    load_source_configs,
)

__all__ = [
    "FieldSelector",
    "SelectorSet",
    "SourceConfig",
    "SourceKind",
    "load_source_configs",
]
