"""Fast, strict JSON decoding and encoding for documents and payloads."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()


def decode_json(data: str | bytes, repair: bool = False) -> Any:
    """
    Decode a JSON value strictly, optionally repairing malformed input.

    Args:
        data: JSON text or UTF-8 bytes
        repair: Run json_repair over the text when strict decoding fails

    Returns:
        Decoded Python value (any JSON type, not only objects)

    Raises:
        JSONParseError: If decoding fails
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data

    try:
        return _decoder.decode(raw)
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        strict_error = e

    try:
        text = raw.decode("utf-8", errors="replace")
        return json.loads(repair_json(text))
    except (ValueError, TypeError) as repair_error:
        raise JSONParseError(
            f"Invalid JSON: {strict_error} (repair failed: {repair_error})", repair_error
        ) from repair_error


def dumps_compact(obj: Any) -> str:
    """Encode to compact JSON text (no whitespace between tokens)."""
    try:
        return orjson.dumps(obj).decode("utf-8")
    except TypeError:
        # orjson rejects integers outside 64-bit range and non-str keys
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def dumps_pretty(obj: Any, indent: int = 2) -> str:
    """Encode to indented JSON text for editors and templates."""
    return json.dumps(obj, indent=indent, ensure_ascii=False)


def validate_json_size(data: str | bytes, max_size: int, name: str = "JSON") -> None:
    """
    Reject oversized input before decoding.

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 100, current_depth: int = 0) -> None:
    """
    Reject values nested deeper than max_depth containers.

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
