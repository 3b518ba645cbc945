"""
Object helpers: a rectangle value and JSON encode/decode that keeps types.
"""

from .json_codec import JsonParseError, JsonShapeError, decode_from_json_as, encode_to_json
from .rectangle import Rectangle, make_rectangle

__all__ = [
    "JsonParseError",
    "JsonShapeError",
    "Rectangle",
    "decode_from_json_as",
    "encode_to_json",
    "make_rectangle",
]
