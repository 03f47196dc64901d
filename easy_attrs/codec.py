from typing import Any

from pydantic_core import from_json, to_json


def decode(text: str | bytes | bytearray) -> Any:
    """ Parse JSON text; malformed input raises ``ValueError`` """
    return from_json(text)


def encode(data: Any) -> str:
    return to_json(data).decode('utf-8')
