"""
All tunable configuration of a client's connection to the API.

The config is a plain value: the callers construct it directly
(or load it from a kubeconfig file, see :mod:`kubeconfig`), and then pass it
to :func:`osclient.new`, which makes its own copy and fills the unset fields
with the defaults; see :func:`osclient.set_openshift_defaults`.

The "rudimentary" connection information is the one passed to the HTTP
protocol and TCP/SSL connection only, i.e. everything usable in a generic
HTTP client, and nothing more than that:

* Server URL (or a host:port pair, then HTTPS is implied).
* SSL verification/ignorance flag.
* SSL certificate authority.
* SSL client certificate and its private key.
* HTTP ``Authorization: Basic username:password``.
* HTTP ``Authorization: Bearer token``.
"""
import dataclasses
from typing import Optional

from osclient._cogs.structs import codecs


class ConfigError(Exception):
    """ Raised when the client cannot be configured with the given values. """


@dataclasses.dataclass()
class Config:
    host: str = ''  # e.g. "https://localhost:8443"

    # The API addressing and serialization; filled with the defaults if unset.
    prefix: str = ''
    version: str = ''
    codec: Optional[codecs.Codec] = None
    user_agent: str = ''
    legacy_behavior: bool = False

    # Authentication.
    bearer_token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    # TLS.
    insecure: bool = False
    ca_path: Optional[str] = None
    ca_data: Optional[bytes] = None
    cert_path: Optional[str] = None
    cert_data: Optional[bytes] = None
    key_path: Optional[str] = None
    key_data: Optional[bytes] = None

    # Networking. `None` means no limit.
    request_timeout: Optional[float] = 5 * 60  # == aiohttp.client.DEFAULT_TIMEOUT
    connect_timeout: Optional[float] = None

    # Not used by the client itself, but kept for the callers (e.g. the CLI).
    default_namespace: Optional[str] = None
