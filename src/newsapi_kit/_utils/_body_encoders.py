"""Body encoding strategies used by request specs.

An encoder turns a flat parameter map into request body bytes. Encoders are
pure: no I/O, and the same key/value content always yields the same bytes.
"""

import json
from typing import Mapping, Protocol, runtime_checkable
from urllib.parse import urlencode


@runtime_checkable
class BodyEncoder(Protocol):
    content_type: str

    def encode(self, parameters: Mapping[str, str]) -> bytes: ...


class JSONBodyEncoder:
    """Encode parameters as a compact UTF-8 JSON object with sorted keys."""

    content_type = "application/json"

    def encode(self, parameters: Mapping[str, str]) -> bytes:
        return json.dumps(
            dict(parameters),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")

    def __repr__(self) -> str:
        return "JSONBodyEncoder()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JSONBodyEncoder)

    def __hash__(self) -> int:
        return hash(type(self))


class FormURLEncodedBodyEncoder:
    """Encode parameters as ``application/x-www-form-urlencoded``."""

    content_type = "application/x-www-form-urlencoded"

    def encode(self, parameters: Mapping[str, str]) -> bytes:
        for key, value in parameters.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"Form parameters must be strings, got {key!r}={value!r}"
                )
        return urlencode(sorted(parameters.items())).encode("ascii")

    def __repr__(self) -> str:
        return "FormURLEncodedBodyEncoder()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FormURLEncodedBodyEncoder)

    def __hash__(self) -> int:
        return hash(type(self))
