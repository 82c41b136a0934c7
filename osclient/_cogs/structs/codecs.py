"""
Serialization of the bodies for specific API versions.

A codec is bound to one API version: it marks the outgoing objects with it
if they are not marked yet, and decodes the incoming ones as is.
Custom codecs can be passed via the client's config; they only need
to follow the :class:`Codec` protocol.
"""
import json
from typing import Any, Protocol

from osclient._cogs.structs import bodies


class Codec(Protocol):
    version: str

    def encode(self, obj: bodies.RawInput) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...


class JSONCodec:
    """
    The default codec: plain JSON with the API version added if absent.
    """

    content_type = 'application/json'

    def __init__(self, version: str) -> None:
        super().__init__()
        self.version = version

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.version!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSONCodec):
            return self.version == other.version
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.version)

    def encode(self, obj: bodies.RawInput) -> bytes:
        body = dict(obj)  # shallow: only the top-level key is added.
        body.setdefault('apiVersion', self.version)
        return json.dumps(body).encode('utf-8')

    def decode(self, data: bytes) -> Any:
        return json.loads(data.decode('utf-8')) if data else None
