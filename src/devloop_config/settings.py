"""Registry of settable configuration keys.

Each key maps to a ContextConfig attribute and a coercer that turns the
string given on the command line into the attribute's value. Every coercer
maps the empty string to the attribute's zero value, which is how unset works.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigValidationError
from .exceptions import UnknownKeyError
from .models import ContextConfig

_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}


def _coerce_str(raw: str, current: Any) -> str:
    return raw


def _coerce_bool(raw: str, current: Any) -> bool | None:
    if raw == "":
        return None
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigValidationError(f"invalid boolean value '{raw}'")


def _coerce_list(raw: str, current: Any) -> list[str]:
    """Append raw to the current list; empty string clears it."""
    if raw == "":
        return []
    values = list(current or [])
    if raw not in values:
        values.append(raw)
    return values


@dataclass(frozen=True)
class Setting:
    """A settable configuration key.

    Attributes:
        key: Name used on the command line and on disk
        attr: ContextConfig attribute holding the value
        coerce: Converts (raw string, current value) to the new value
    """

    key: str
    attr: str
    coerce: Callable[[str, Any], Any]

    def get(self, record: ContextConfig) -> Any:
        return getattr(record, self.attr)

    def apply(self, record: ContextConfig, raw: str) -> None:
        """Coerce raw and store it on record.

        Raises:
            ConfigValidationError: If raw is not valid for this setting
        """
        setattr(record, self.attr, self.coerce(raw, self.get(record)))


SETTINGS: dict[str, Setting] = {
    s.key: s
    for s in (
        Setting("default-repo", "default_repo", _coerce_str),
        Setting("multi-level-repo", "multi_level_repo", _coerce_bool),
        Setting("local-cluster", "local_cluster", _coerce_bool),
        Setting("insecure-registries", "insecure_registries", _coerce_list),
        Setting("debug-helpers-registry", "debug_helpers_registry", _coerce_str),
        Setting("update-check", "update_check", _coerce_bool),
        Setting("collect-metrics", "collect_metrics", _coerce_bool),
    )
}


def get_setting(key: str) -> Setting:
    """Look up a setting by key.

    Raises:
        UnknownKeyError: If key is not registered
    """
    try:
        return SETTINGS[key]
    except KeyError:
        raise UnknownKeyError(key) from None
