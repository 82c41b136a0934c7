"""
All the structures coming from/to the API.

The bodies are kept raw (as decoded JSON) for the callers: the client does not
model the objects of the resource families in any way, it only transports them.
"""
from typing import Any, Dict, Mapping

from typing_extensions import Literal, TypedDict

# As received from the API or as passed to the API, not interpreted by the client.
RawBody = Dict[str, Any]
RawInput = Mapping[str, Any]

RawEventType = Literal[None, 'ADDED', 'MODIFIED', 'DELETED', 'ERROR']


class RawEvent(TypedDict, total=True):
    type: RawEventType
    object: RawBody


def get_name(body: RawInput) -> str:
    name = (body.get('metadata') or {}).get('name')
    if not name:
        raise ValueError(f"The object has no name in its metadata: {body!r}")
    return str(name)
