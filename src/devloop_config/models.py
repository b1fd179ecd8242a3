"""Data models for devloop-config."""

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from typing import Any
from typing import ClassVar
from typing import Protocol
from typing import TypeVar

R = TypeVar("R", bound="JSONRecord")


class JSONRecord(Protocol):
    """Structured value that converts to and from a JSON-compatible dict."""

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls: type[R], data: dict[str, Any]) -> R: ...


@dataclass(frozen=True)
class ScopeSelector:
    """Selects which configuration record a command targets.

    Attributes:
        global_scope: Target the global record instead of a context
        kube_context: Context name; resolved from the kubeconfig when None
    """

    global_scope: bool = False
    kube_context: str | None = None


def _setting(key: str, kind: type, **kwargs: Any) -> Any:
    return field(metadata={"key": key, "kind": kind}, **kwargs)


@dataclass
class ContextConfig:
    """Configuration record for one scope (global or a kube context).

    Zero values (empty string, None, empty list) mean "not set" and are
    left out of the serialized form.
    """

    kube_context: str = _setting("kube-context", str, default="")
    default_repo: str = _setting("default-repo", str, default="")
    multi_level_repo: bool | None = _setting("multi-level-repo", bool, default=None)
    local_cluster: bool | None = _setting("local-cluster", bool, default=None)
    insecure_registries: list[str] = _setting("insecure-registries", list, default_factory=list)
    debug_helpers_registry: str = _setting("debug-helpers-registry", str, default="")
    update_check: bool | None = _setting("update-check", bool, default=None)
    collect_metrics: bool | None = _setting("collect-metrics", bool, default=None)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form, keyed by on-disk names."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value in ("", None, []):
                continue
            data[f.metadata["key"]] = list(value) if isinstance(value, list) else value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContextConfig":
        """Build a record from its serialized form.

        Unknown keys are ignored.

        Raises:
            TypeError: If a value does not match the field type
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata["key"]
            if key not in data or data[key] is None:
                continue
            value = data[key]
            kind = f.metadata["kind"]
            if kind is list:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise TypeError(f"'{key}' must be a list of strings, got {value!r}")
                value = list(value)
            elif kind is bool:
                if not isinstance(value, bool):
                    raise TypeError(f"'{key}' must be a boolean, got {value!r}")
            elif not isinstance(value, str):
                raise TypeError(f"'{key}' must be a string, got {value!r}")
            values[f.name] = value
        return cls(**values)


@dataclass
class GlobalConfig:
    """Whole configuration file: global defaults plus per-context overrides.

    Attributes:
        global_config: Defaults applied to every context
        kube_contexts: Ordered context records, unique by kube_context
    """

    GLOBAL_KEY: ClassVar[str] = "global"
    CONTEXTS_KEY: ClassVar[str] = "kubeContexts"

    global_config: ContextConfig = field(default_factory=ContextConfig)
    kube_contexts: list[ContextConfig] = field(default_factory=list)

    def find_context(self, name: str) -> ContextConfig | None:
        """Return the record for a context, or None if it has none."""
        for context in self.kube_contexts:
            if context.kube_context == name:
                return context
        return None

    def get_or_create_context(self, name: str) -> ContextConfig:
        """Return the record for a context, appending a new one if missing."""
        context = self.find_context(name)
        if context is None:
            context = ContextConfig(kube_context=name)
            self.kube_contexts.append(context)
        return context

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form of the whole file."""
        data: dict[str, Any] = {}
        global_data = self.global_config.to_dict()
        if global_data:
            data[self.GLOBAL_KEY] = global_data
        if self.kube_contexts:
            data[self.CONTEXTS_KEY] = [context.to_dict() for context in self.kube_contexts]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlobalConfig":
        """Build the file model from its serialized form.

        Raises:
            TypeError: If a section has the wrong shape
        """
        global_data = data.get(cls.GLOBAL_KEY)
        if global_data is None:
            global_data = {}
        if not isinstance(global_data, dict):
            raise TypeError(f"'{cls.GLOBAL_KEY}' must be a mapping, got {global_data!r}")

        contexts_data = data.get(cls.CONTEXTS_KEY) or []
        if not isinstance(contexts_data, list):
            raise TypeError(f"'{cls.CONTEXTS_KEY}' must be a list, got {contexts_data!r}")

        contexts: list[ContextConfig] = []
        for entry in contexts_data:
            if not isinstance(entry, dict):
                raise TypeError(f"'{cls.CONTEXTS_KEY}' entries must be mappings, got {entry!r}")
            context = ContextConfig.from_dict(entry)
            # first record wins for duplicate context names
            if any(c.kube_context == context.kube_context for c in contexts):
                continue
            contexts.append(context)

        return cls(global_config=ContextConfig.from_dict(global_data), kube_contexts=contexts)
