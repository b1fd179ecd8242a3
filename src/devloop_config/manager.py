"""Configuration manager for global and per-context settings."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import DeserializationError
from .exceptions import SerializationError
from .kubecontext import current_kube_context
from .models import ContextConfig
from .models import GlobalConfig
from .models import ScopeSelector
from .serialization import clone_through_json
from .settings import get_setting
from .utils import deep_merge

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration across the global and kube-context scopes.

    The configuration file holds one global record and an ordered list of
    per-context records. Every mutation loads the whole file, changes one
    field and writes the whole file back. Concurrent writers are not
    serialized: the last one wins.

    Effective values for a context (highest to lowest priority):
    1. Context record
    2. Global record

    Args:
        config_file: Path to the YAML configuration file
        kubeconfig: Kubeconfig used to find the current context
            (default: $KUBECONFIG or ~/.kube/config)
    """

    def __init__(self, config_file: Path, kubeconfig: Path | None = None):
        """Initialize configuration manager with injected paths.

        Args:
            config_file: Path to the YAML configuration file
            kubeconfig: Optional kubeconfig override
        """
        self.config_file = config_file
        self.kubeconfig = kubeconfig

    # ===== Scope Resolution =====

    def resolve_scope(self, selector: ScopeSelector) -> ScopeSelector:
        """Fill in the kube context of a non-global selector.

        Args:
            selector: Scope requested by the caller

        Returns:
            Selector that is global or names a context

        Raises:
            ConfigError: If no context was given and the kubeconfig has none
        """
        if selector.global_scope or selector.kube_context:
            return selector

        context = current_kube_context(self.kubeconfig)
        if not context:
            raise ConfigError("unable to determine the current kube context; pass a context or use the global scope")
        logger.debug(f"Using current kube context '{context}'")
        return replace(selector, kube_context=context)

    # ===== Value Mutation =====

    def set_config_value(self, selector: ScopeSelector, key: str, value: str) -> None:
        """Set a configuration value in the selected scope.

        An empty value resets the setting to its zero value.

        Args:
            selector: Target scope
            key: Setting key (e.g. "default-repo")
            value: Raw string value

        Raises:
            UnknownKeyError: If key is not a known setting
            ConfigValidationError: If value is invalid for the setting
            ConfigError: If the scope cannot be resolved
            ConfigFileError: If the file cannot be read or written
        """
        setting = get_setting(key)
        selector = self.resolve_scope(selector)

        config = self.read_config()
        if selector.global_scope:
            record = config.global_config
        else:
            record = config.get_or_create_context(self._context_name(selector))

        setting.apply(record, value)
        self.write_config(config)
        logger.info(f"Set {key} in {self._describe(selector)} to {setting.get(record)!r}")

    def unset_config_value(self, selector: ScopeSelector, key: str) -> None:
        """Reset a configuration value in the selected scope.

        Args:
            selector: Target scope
            key: Setting key
        """
        self.set_config_value(selector, key, "")

    # ===== Reading =====

    def get_config_for_scope(self, selector: ScopeSelector) -> ContextConfig:
        """Get the stored record for a scope.

        Args:
            selector: Scope to read

        Returns:
            Stored record, or an empty record for an unknown context
        """
        selector = self.resolve_scope(selector)
        config = self.read_config()
        if selector.global_scope:
            return config.global_config

        name = self._context_name(selector)
        return config.find_context(name) or ContextConfig(kube_context=name)

    def get_effective_config(self, kube_context: str) -> dict[str, Any]:
        """Get settings for a context merged over the global defaults.

        Args:
            kube_context: Context name

        Returns:
            Merged settings keyed by on-disk names (unset values omitted)
        """
        config = self.read_config()
        merged = config.global_config.to_dict()
        context = config.find_context(kube_context)
        if context:
            merged = deep_merge(merged, context.to_dict())
        merged["kube-context"] = kube_context
        return merged

    # ===== File Access =====

    def read_config(self) -> GlobalConfig:
        """Load the whole configuration file.

        Returns:
            Parsed configuration; empty if the file doesn't exist

        Raises:
            ConfigFileError: If the file cannot be read or has the wrong shape
        """
        if not self.config_file.exists():
            return GlobalConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Failed to read configuration from {self.config_file}: {e}") from e

        if data is None:
            return GlobalConfig()

        try:
            return clone_through_json(data, GlobalConfig())
        except (SerializationError, DeserializationError) as e:
            raise ConfigFileError(f"Invalid configuration in {self.config_file}: {e}") from e

    def write_config(self, config: GlobalConfig) -> None:
        """Write the whole configuration file.

        Args:
            config: Configuration to persist

        Raises:
            ConfigFileError: If write fails
        """
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_file, "w") as f:
                yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigFileError(f"Failed to write configuration to {self.config_file}: {e}") from e

    # ===== Private Helpers =====

    @staticmethod
    def _context_name(selector: ScopeSelector) -> str:
        if not selector.kube_context:
            raise ConfigError("no kube context selected")
        return selector.kube_context

    @staticmethod
    def _describe(selector: ScopeSelector) -> str:
        if selector.global_scope:
            return "global scope"
        return f"context '{selector.kube_context}'"
