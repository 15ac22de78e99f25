"""Module: rename_options.py

Author: Michael Economou
Date: 2026-10-12

Immutable options snapshot for one rename run.

The persisted/UI record uses camelCase keys; from_dict also accepts the
snake_case attribute names.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from autolayername.config import DEFAULT_RENAME_OPTIONS
from autolayername.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# record key -> attribute name
_RECORD_KEYS = {
    "locked": "locked",
    "hidden": "hidden",
    "instance": "instance",
    "renameCustomNames": "rename_custom_names",
    "showSpacing": "show_spacing",
    "usePascalCase": "use_pascal_case",
}
_ATTRIBUTE_KEYS = {attr: key for key, attr in _RECORD_KEYS.items()}


@dataclass(frozen=True)
class RenameOptions:
    """Options for a single rename run.

    Attributes:
        locked: Include locked layers.
        hidden: Include invisible layers.
        instance: Rename component instances and descend into them.
        rename_custom_names: Also overwrite names that look hand-written.
        show_spacing: Append auto-layout spacing to generated names.
        use_pascal_case: Emit PascalCase instead of kebab-case tokens.
    """

    locked: bool = False
    hidden: bool = False
    instance: bool = False
    rename_custom_names: bool = False
    show_spacing: bool = False
    use_pascal_case: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RenameOptions:
        """Build options from a settings record, ignoring unknown keys.

        Raises:
            TypeError: data is not a mapping or a value is not a bool
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"Rename options must be a mapping, got {type(data).__name__}")

        values: dict[str, bool] = {}
        valid_attrs = {f.name for f in fields(cls)}
        for key, value in data.items():
            attr = _RECORD_KEYS.get(key) or (key if key in valid_attrs else None)
            if attr is None:
                continue
            if not isinstance(value, bool):
                raise TypeError(f"Option {key!r} must be a bool, got {value!r}")
            values[attr] = value
        return cls(**values)

    @classmethod
    def defaults(cls) -> RenameOptions:
        return cls.from_dict(dict(DEFAULT_RENAME_OPTIONS))

    def to_dict(self) -> dict[str, bool]:
        """Return the camelCase record used for persistence and the UI."""
        return {_ATTRIBUTE_KEYS[attr]: value for attr, value in asdict(self).items()}


def sanitize_options_record(record: dict[str, Any]) -> dict[str, Any]:
    """Return record with non-bool option values reset to their defaults.

    Unknown keys are kept as they are. Each replaced value is logged.
    """
    clean = dict(record)
    for key, value in record.items():
        attr = _RECORD_KEYS.get(key) or (key if key in _ATTRIBUTE_KEYS else None)
        if attr is None or isinstance(value, bool):
            continue
        default = DEFAULT_RENAME_OPTIONS.get(_ATTRIBUTE_KEYS[attr], False)
        logger.warning("[RenameOptions] Saved option %r has invalid value %r, using %s", key, value, default)
        clean[key] = default
    return clean
