"""Read the current context from the user's kubeconfig."""

import logging
import os
from pathlib import Path

import yaml

from .exceptions import ConfigFileError

logger = logging.getLogger(__name__)

KUBECONFIG_ENV_VAR = "KUBECONFIG"


def kubeconfig_path() -> Path:
    """Get the kubeconfig file kubectl would read first.

    Returns:
        First entry of $KUBECONFIG, or ~/.kube/config
    """
    env = os.environ.get(KUBECONFIG_ENV_VAR, "")
    for entry in env.split(os.pathsep):
        if entry:
            return Path(entry).expanduser()
    return Path.home() / ".kube" / "config"


def current_kube_context(path: Path | None = None) -> str | None:
    """Get the ``current-context`` from a kubeconfig file.

    Args:
        path: Kubeconfig to read (default: kubeconfig_path())

    Returns:
        Context name, or None if the file is missing or sets no context

    Raises:
        ConfigFileError: If the file exists but is not valid YAML
    """
    path = path or kubeconfig_path()
    if not path.exists():
        logger.debug(f"No kubeconfig at {path}")
        return None

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"Failed to read kubeconfig {path}: {e}") from e

    if not isinstance(data, dict):
        return None
    context = data.get("current-context")
    return str(context) if context else None
