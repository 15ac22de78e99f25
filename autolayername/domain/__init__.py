"""Domain layer: node kinds, name classification and error types.

Pure Python, no I/O. Everything here is safe to call once per node while
walking large selections.
"""

from autolayername.domain.errors import (
    AutoLayerNameError,
    InvalidDocumentError,
    NamingStrategyError,
    SettingsError,
    UnknownNodeKindError,
)
from autolayername.domain.name_classifier import (
    is_host_generated_name,
    is_host_or_plugin_generated_name,
    is_plugin_generated_name,
)
from autolayername.domain.node_types import (
    ALL_NODE_KINDS,
    BOOLEAN_OPERATION_LABELS,
    NodeKind,
    is_valid_node_kind,
)

__all__ = [
    "ALL_NODE_KINDS",
    "BOOLEAN_OPERATION_LABELS",
    "AutoLayerNameError",
    "InvalidDocumentError",
    "NamingStrategyError",
    "NodeKind",
    "SettingsError",
    "UnknownNodeKindError",
    "is_host_generated_name",
    "is_host_or_plugin_generated_name",
    "is_plugin_generated_name",
    "is_valid_node_kind",
]
