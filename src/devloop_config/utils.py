"""Utility functions for devloop-config."""

import re
from pathlib import PurePath
from typing import Any

SUPPORTED_KUBERNETES_EXTENSIONS = (".yaml", ".yml", ".json")


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> base = {"default-repo": "gcr.io/a", "local-cluster": False}
        >>> overlay = {"local-cluster": True}
        >>> deep_merge(base, overlay)
        {'default-repo': 'gcr.io/a', 'local-cluster': True}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def expand(text: str, key: str, value: str) -> str:
    """Replace ``${key}`` and ``$key`` placeholders in text.

    A bare ``$key`` only matches when it is not followed by another identifier
    character, so expanding ``key`` leaves ``$key1`` and ``${key1}`` alone.

    Args:
        text: Text containing placeholders
        key: Placeholder name
        value: Replacement, inserted literally

    Returns:
        Text with every placeholder for key replaced

    Examples:
        >>> expand("BEFORE[$key][${key}]AFTER", "key", "VALUE")
        'BEFORE[VALUE][VALUE]AFTER'
        >>> expand("$key1", "key", "VALUE")
        '$key1'
    """
    name = re.escape(key)
    pattern = re.compile(rf"\$\{{{name}\}}|\${name}(?![A-Za-z0-9_])")
    return pattern.sub(lambda _: value, text)


def non_empty_lines(data: bytes | str) -> list[str]:
    """Split command output into lines, dropping blank ones."""
    if isinstance(data, bytes):
        data = data.decode()
    return [line.rstrip("\r") for line in data.split("\n") if line.rstrip("\r")]


def remove_from_slice(values: list[str], target: str) -> list[str]:
    """Return a copy of values without any occurrence of target."""
    return [value for value in values if value != target]


def is_supported_kubernetes_format(name: str) -> bool:
    """Check whether a file name has a Kubernetes manifest extension."""
    return PurePath(name).suffix in SUPPORTED_KUBERNETES_EXTENSIONS


def is_hidden_dir(name: str) -> bool:
    # "." and ".." are navigation entries, not hidden directories
    return name.startswith(".") and name not in (".", "..")


def is_hidden_file(name: str) -> bool:
    return name.startswith(".")
