"""DataURI serialization — dict/JSON round-trip for records.

Marshals DataURI records for generic frameworks (JSON APIs, config files,
caches). The payload always travels as the canonical URI text, so decoding
goes through the same parser as any other input:

    from_json(to_json(uri)) == uri

Example:
    from incrusta import decode
    from incrusta.serialization import to_json, from_json

    uri = decode("data:text/plain;charset=utf-8,heya")
    json_str = to_json(uri)       # '"data:text/plain;charset=utf-8,heya"'
    assert from_json(json_str) == uri

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from incrusta.errors import DecodeError
from incrusta.nodes import DataURI
from incrusta.parser import Parser
from incrusta.renderers.text import TextRenderer

_TYPE_TAG = "DataURI"


def to_dict(uri: DataURI) -> dict[str, Any]:
    """Convert a DataURI to a JSON-compatible dict.

    Includes a ``_type`` discriminator plus the decoded header fields for
    inspection; ``uri`` holds the canonical text and is the only field
    from_dict() reads.

    """
    return {
        "_type": _TYPE_TAG,
        "type": uri.type,
        "subtype": uri.subtype,
        "params": {key: uri.params[key] for key in sorted(uri.params)},
        "encoding": uri.encoding.value,
        "uri": TextRenderer().render(uri),
    }


def from_dict(data: dict[str, Any]) -> DataURI:
    """Reconstruct a DataURI from a dict produced by to_dict().

    Raises:
        DecodeError: Missing discriminator or ``uri`` field, or the text
            does not decode.
    """
    if data.get("_type") != _TYPE_TAG:
        raise DecodeError(f"expected _type {_TYPE_TAG!r}, got {data.get('_type')!r}")
    text = data.get("uri")
    if not isinstance(text, str):
        raise DecodeError("missing 'uri' field")
    return Parser(text).parse()


def to_json(uri: DataURI, *, indent: int | None = None) -> str:
    """Serialize a DataURI as a JSON string literal of its canonical text."""
    return json.dumps(TextRenderer().render(uri), indent=indent)


def from_json(json_str: str) -> DataURI:
    """Deserialize a DataURI from a JSON string literal.

    Raises:
        DecodeError: The JSON value is not a string, or does not decode.
    """
    value = json.loads(json_str)
    if not isinstance(value, str):
        raise DecodeError(f"expected a JSON string, got {type(value).__name__}")
    return Parser(value).parse()
