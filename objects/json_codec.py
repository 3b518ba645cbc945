"""
JSON helpers.

encode_to_json writes compact JSON ('[1,2,3]', '{"width":10,"height":20}').
decode_from_json_as parses a JSON object and rebinds it to a class, so the
class methods work on the decoded data:

    r = decode_from_json_as(Rectangle, '{"width":10,"height":20}')
    r.get_area()  # => 200
"""

import dataclasses
import json
import logging
from typing import Any, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonParseError(ValueError):
    pass


class JsonShapeError(TypeError):
    pass


def _default(obj: Any) -> Any:
    # dataclasses and plain objects are encoded by their instance attributes
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_to_json(value: Any) -> str:
    # NaN and Infinity have no JSON form; json.dumps raises ValueError for them
    return json.dumps(
        value, default=_default, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def _reject_constant(name: str) -> Any:
    raise JsonParseError(f"Invalid JSON: {name} is not a JSON value")


def decode_from_json_as(cls: Type[T], json_text: str) -> T:
    """
    Parse `json_text` and return an instance of `cls` carrying its keys.

    The instance is created without calling `__init__`; the decoded keys become
    instance attributes as-is (slotted and frozen classes included). A `dict`
    subclass receives the keys as items instead.

    Raises:
        JsonParseError: If `json_text` is not valid JSON
        JsonShapeError: If the document is not a JSON object, or `cls` cannot
            hold its keys
    """
    try:
        data = json.loads(json_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise JsonShapeError(
            f"Cannot decode JSON {type(data).__name__} as {cls.__name__}; expected an object"
        )

    if issubclass(cls, dict):
        obj = cls(data)
    else:
        try:
            obj = cls.__new__(cls)
            for key, value in data.items():
                object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as e:
            raise JsonShapeError(f"Cannot decode JSON object as {cls.__name__}: {e}") from e
    logger.debug("Decoded %s with keys %s", cls.__name__, list(data))
    return obj
