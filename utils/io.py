"""
I/O helpers to save and load JSON atomically.
"""

from pathlib import Path
import tempfile
import shutil
import logging
from typing import Any, Type, TypeVar, Union

from objects.json_codec import decode_from_json_as, encode_to_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


def save_json_atomic(obj: Any, dest: Union[str, Path]) -> None:
    """
    Atomically save an object as JSON to a destination file.
    
    Args:
        obj: The object to serialize to JSON (dataclasses and plain objects included)
        dest: Destination file path as string or Path
        
    Raises:
        OSError: If file operations fail
        TypeError: If object is not JSON serializable
    """
    try:
        dest = Path(dest)
        dest.parent.mkdir(parents=True, exist_ok=True)

        try:
            payload = encode_to_json(obj)
        except TypeError as e:
            raise TypeError(f"Object is not JSON serializable: {e}")

        with tempfile.NamedTemporaryFile(
            "w", delete=False, dir=str(dest.parent), suffix=".tmp", encoding="utf-8"
        ) as tf:
            tf.write(payload)
            tmp = tf.name

        shutil.move(tmp, str(dest))
        logger.info("Saved JSON to %s", dest)

    except OSError as e:
        logger.error("Failed to save JSON to %s: %s", dest, e)
        raise


def load_json_as(cls: Type[T], src: Union[str, Path]) -> T:
    src = Path(src)
    text = src.read_text(encoding="utf-8")
    logger.debug("Loaded %d bytes of JSON from %s", len(text), src)
    return decode_from_json_as(cls, text)
