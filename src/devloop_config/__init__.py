"""devloop-config: Workspace paths and scoped configuration for devloop.

This library provides the mechanism behind ``devloop config`` and workspace
file discovery:
- Global defaults and per-kube-context overrides stored in one YAML file
- Setting and clearing values by key (e.g. ``default-repo``)
- Expanding glob patterns into workspace files and telling local files
  from remote (git/https) references

Applications inject the config file path; the library reads, mutates and
writes the whole file.

Public API:
    ConfigManager: Reads and mutates the configuration file
    ScopeSelector: Global scope or a named kube context
    ContextConfig, GlobalConfig: Typed configuration records
    expand_paths_glob, abs_file, is_local_file, is_remote: Path helpers
    clone_through_json: Populate a typed record from loose data
    expand, deep_merge: Text and dict utilities
    ConfigError and subclasses: Exception types

Example:
    ```python
    from pathlib import Path
    from devloop_config import ConfigManager, ScopeSelector

    config = ConfigManager(Path.home() / ".devloop" / "config.yaml")

    # Write to a kube context
    config.set_config_value(ScopeSelector(kube_context="kind"), "default-repo", "localhost:5000")

    # Clear a global value
    config.unset_config_value(ScopeSelector(global_scope=True), "update-check")
    ```
"""

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .exceptions import DeserializationError
from .exceptions import DirectoryNotFileError
from .exceptions import PathNotFoundError
from .exceptions import SerializationError
from .exceptions import UnknownKeyError
from .manager import ConfigManager
from .models import ContextConfig
from .models import GlobalConfig
from .models import ScopeSelector
from .paths import abs_file
from .paths import expand_paths_glob
from .paths import is_local_file
from .paths import is_remote
from .serialization import clone_through_json
from .utils import deep_merge
from .utils import expand

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "ScopeSelector",
    "ContextConfig",
    "GlobalConfig",
    "abs_file",
    "expand_paths_glob",
    "is_local_file",
    "is_remote",
    "clone_through_json",
    "deep_merge",
    "expand",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "UnknownKeyError",
    "PathNotFoundError",
    "DirectoryNotFileError",
    "SerializationError",
    "DeserializationError",
]
