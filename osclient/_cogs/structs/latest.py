"""
The registry of the API versions known to this client.

The first version is the preferred one: it is used when none is configured.
"""
import dataclasses
from typing import Dict, Tuple

from osclient._cogs.structs import codecs

# The API version which passes the namespaces & selectors in the legacy way.
LEGACY_VERSION = 'v1beta1'

# All recognized versions, the preferred/default one first.
VERSIONS: Tuple[str, ...] = ('v1beta1', 'v1beta3')

# The preferred version for the clients. No negotiation with the server is done.
VERSION: str = VERSIONS[0]


class UnknownVersionError(ValueError):
    """ Raised when an API version is not in the registry. """


@dataclasses.dataclass(frozen=True)
class VersionInterfaces:
    version: str
    codec: codecs.Codec


_INTERFACES: Dict[str, VersionInterfaces] = {
    version: VersionInterfaces(version=version, codec=codecs.JSONCodec(version))
    for version in VERSIONS
}


def interfaces_for(version: str) -> VersionInterfaces:
    try:
        return _INTERFACES[version]
    except KeyError:
        raise UnknownVersionError(f"Unsupported API version: {version!r}") from None
