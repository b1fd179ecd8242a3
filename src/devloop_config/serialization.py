"""JSON round-trip cloning between structured types."""

import json
import logging
from typing import Any
from typing import TypeVar

from .exceptions import DeserializationError
from .exceptions import SerializationError
from .models import JSONRecord

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=JSONRecord)


def clone_through_json(source: Any, dest: T) -> T:
    """Populate a structured value from an arbitrary source through JSON.

    The source is serialized to JSON text and parsed back; its keys override
    the matching fields of ``dest``. Fields missing from the source keep the
    value they have in ``dest``, so ``dest`` is normally a fresh instance.

    ``dest`` itself is never modified; callers must use the returned instance.

    Args:
        source: Any JSON-serializable value; objects exposing ``to_dict()``
            are serialized through it
        dest: Instance of the destination type, supplying defaults

    Returns:
        New instance of ``type(dest)`` holding the populated values

    Raises:
        SerializationError: If source cannot be encoded as JSON
        DeserializationError: If the decoded data does not fit the destination

    Example:
        >>> clone_through_json({"default-repo": "gcr.io/demo"}, ContextConfig()).default_repo
        'gcr.io/demo'
    """
    try:
        text = json.dumps(source, default=_to_json)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize {type(source).__name__}: {e}") from e

    data = json.loads(text)
    if not isinstance(data, dict):
        raise DeserializationError(f"Cannot populate {type(dest).__name__} from JSON {type(data).__name__}")

    try:
        return type(dest).from_dict({**dest.to_dict(), **data})
    except (TypeError, ValueError) as e:
        raise DeserializationError(f"Failed to populate {type(dest).__name__}: {e}") from e


def _to_json(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
