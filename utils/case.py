"""
Field-name case conversion between Python (snake_case) and the wire (camelCase).
Uses Pydantic's alias_generators so names agree with the schema aliases.
"""
from typing import Any

from pydantic.alias_generators import to_camel, to_snake


def to_camel_key(s: str) -> str:
    """full_name -> fullName."""
    return to_camel(s)


def to_snake_key(s: str) -> str:
    """fullName -> full_name; snake_case input passes through unchanged."""
    return to_snake(s)


def dict_keys_to_camel(obj: Any) -> Any:
    """Recursively convert dict keys to camelCase for API responses."""
    if isinstance(obj, dict):
        return {to_camel_key(k): dict_keys_to_camel(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [dict_keys_to_camel(x) for x in obj]
    return obj
