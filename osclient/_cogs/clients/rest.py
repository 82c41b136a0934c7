"""
The generic REST transport for the API: requests, responses, streams.

The transport knows nothing about the resource families: it only builds
the URLs for the given resource references, encodes & decodes the bodies
with the configured codec, and checks the responses for the API errors.

The aiohttp session is opened lazily on the first request, so that
constructing a client never does any I/O and does not need an event loop.
"""
import base64
import contextlib
import logging
import os
import ssl
import tempfile
import urllib.parse
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Union

import aiohttp

from osclient._cogs.clients import errors
from osclient._cogs.configs import configuration
from osclient._cogs.structs import bodies, codecs, references

logger = logging.getLogger(__name__)


class RESTClient:
    """
    A container for an aiohttp session and the config it is built from.

    The config must be already defaulted: the prefix, version, and codec
    are used as is. See :func:`osclient.set_openshift_defaults`.
    """

    config: configuration.Config
    codec: codecs.Codec
    server: str

    _session: Optional[aiohttp.ClientSession]

    def __init__(
            self,
            config: configuration.Config,
    ) -> None:
        super().__init__()
        if config.codec is None:
            raise configuration.ConfigError("A codec is required for the REST client.")
        self.config = config
        self.codec = config.codec
        self.server = default_server_url(config)
        self._session = None

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.server}{self.prefix}/{self.version}>'

    async def __aenter__(self) -> "RESTClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    @property
    def prefix(self) -> str:
        return self.config.prefix

    @property
    def version(self) -> str:
        return self.config.version

    @property
    def legacy_behavior(self) -> bool:
        return self.config.legacy_behavior

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    def build_url(
            self,
            resource: references.Resource,
            *,
            namespace: references.Namespace = None,
            name: Optional[str] = None,
            subresource: Optional[str] = None,
            watch: bool = False,
            params: Optional[Mapping[str, str]] = None,
    ) -> str:
        return resource.get_url(
            prefix=self.prefix,
            version=self.version,
            legacy=self.legacy_behavior,
            namespace=namespace,
            name=name,
            subresource=subresource,
            watch=watch,
            params=params,
        )

    def selector_params(
            self,
            *,
            label_selector: Optional[str] = None,
            field_selector: Optional[str] = None,
    ) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if label_selector:
            params['labels' if self.legacy_behavior else 'labelSelector'] = label_selector
        if field_selector:
            params['fields' if self.legacy_behavior else 'fieldSelector'] = field_selector
        return params

    async def request(
            self,
            method: str,
            url: str,  # relative to the server root.
            *,
            payload: Optional[bodies.RawInput] = None,
            headers: Optional[Mapping[str, str]] = None,
            timeout: Optional[aiohttp.ClientTimeout] = None,
    ) -> aiohttp.ClientResponse:
        if '://' not in url:
            url = self.server.rstrip('/') + '/' + url.lstrip('/')

        if timeout is None:
            timeout = aiohttp.ClientTimeout(
                total=self.config.request_timeout,
                sock_connect=self.config.connect_timeout,
            )

        all_headers: Dict[str, str] = dict(headers or {})
        data: Optional[bytes] = None
        if payload is not None:
            data = self.codec.encode(payload)
            content_type = getattr(self.codec, 'content_type', 'application/json')
            all_headers.setdefault('Content-Type', content_type)

        logger.debug(f"Requesting: {method.upper()} {url}")
        session = self._get_session()
        response = await session.request(
            method=method,
            url=url,
            data=data,
            headers=all_headers,
            timeout=timeout,
        )
        await errors.check_response(response)  # but do not parse it!
        return response

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self._parsed('get', url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self._parsed('post', url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self._parsed('put', url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self._parsed('delete', url, **kwargs)

    async def _parsed(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self.request(method, url, **kwargs)
        async with response:
            return self.codec.decode(await response.read())

    async def stream(
            self,
            url: str,  # relative to the server root.
            *,
            headers: Optional[Mapping[str, str]] = None,
            timeout: Optional[aiohttp.ClientTimeout] = None,
    ) -> AsyncIterator[Any]:
        if timeout is None:
            timeout = aiohttp.ClientTimeout(
                total=None,  # the watch-streams are long-living by design of the API.
                sock_connect=self.config.connect_timeout,
            )
        response = await self.request('get', url, headers=headers, timeout=timeout)
        async with response:
            async for line in iter_jsonlines(response.content):
                yield self.codec.decode(line)

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = make_aiohttp_session(self.config)
        return self._session


def rest_client_for(config: configuration.Config) -> RESTClient:
    """
    Create a REST client for a defaulted config.
    """
    return RESTClient(config)


def default_server_url(config: configuration.Config) -> str:
    """
    Normalise the host to a URL: bare hosts and host:port pairs imply HTTPS.
    """
    host = config.host.strip()
    if not host:
        raise configuration.ConfigError("The host must be a URL or a host:port pair.")
    if '://' not in host:
        host = f'https://{host}'
    parsed = urllib.parse.urlparse(host)
    if not parsed.hostname:
        raise configuration.ConfigError(f"The host is not a URL or a host:port pair: {config.host!r}")
    return host.rstrip('/')


def make_aiohttp_session(config: configuration.Config) -> aiohttp.ClientSession:

    # Some SSL data are not accepted directly, so we have to use temp files.
    # Do not even create temporary files if there is no need. It can be a readonly filesystem.
    with contextlib.ExitStack() as stack:

        cert_path: Union[str, bytes, "os.PathLike[str]", None]
        if config.cert_path:
            cert_path = config.cert_path
        elif config.cert_data:
            cert_file = stack.enter_context(tempfile.NamedTemporaryFile(buffering=0))
            cert_file.write(decode_to_pem(config.cert_data).encode('ascii'))
            cert_path = cert_file.name
        else:
            cert_path = None

        pkey_path: Union[str, bytes, "os.PathLike[str]", None]
        if config.key_path:
            pkey_path = config.key_path
        elif config.key_data:
            pkey_file = stack.enter_context(tempfile.NamedTemporaryFile(buffering=0))
            pkey_file.write(decode_to_pem(config.key_data).encode('ascii'))
            pkey_path = pkey_file.name
        else:
            pkey_path = None

        # The SSL part (both client certificate auth and CA verification).
        context = ssl.create_default_context(
            purpose=ssl.Purpose.SERVER_AUTH,
            cafile=config.ca_path,
            cadata=decode_to_pem(config.ca_data) if config.ca_data is not None else None,
        )
        if cert_path and pkey_path:
            context.load_cert_chain(certfile=cert_path, keyfile=pkey_path)

    if config.insecure:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    # The token auth part.
    headers: Dict[str, str] = {}
    if config.bearer_token:
        headers['Authorization'] = f'Bearer {config.bearer_token}'
    if config.user_agent:
        headers['User-Agent'] = config.user_agent

    # The basic auth part.
    auth: Optional[aiohttp.BasicAuth]
    if config.username and config.password and not config.bearer_token:
        auth = aiohttp.BasicAuth(config.username, config.password)
    else:
        auth = None

    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(
            limit=0,
            ssl=context,
        ),
        headers=headers,
        auth=auth,
    )


def decode_to_pem(data: Union[str, bytes]) -> str:
    if isinstance(data, str) and data.startswith('-----BEGIN '):
        return data
    elif isinstance(data, bytes) and data.startswith(b'-----BEGIN '):
        return data.decode('ascii')
    else:
        return base64.b64decode(data).decode('ascii')


async def iter_jsonlines(
        content: aiohttp.StreamReader,
        chunk_size: int = 1024 * 1024,
) -> AsyncIterator[bytes]:
    """
    Split the streamed content into non-empty lines, however long they are.

    Unlike ``async for line in response.content``, there is no limit
    on the line length: aiohttp refuses to buffer more than 128 KiB
    (twice its ``DEFAULT_LIMIT``) for a line, while the watch-events
    of some objects (e.g. processed templates) are much longer than that.
    """

    # No more than 2 copies of a line are kept at a time: in the buffer and as the yielded value.
    buffer = b''
    async for data in content.iter_chunked(chunk_size):
        buffer += data
        del data

        start = 0
        index = buffer.find(b'\n', start)
        while index >= 0:
            line = buffer[start:index]
            if line:
                yield line
            del line
            start = index + 1
            index = buffer.find(b'\n', start)

        if start > 0:
            buffer = buffer[start:]

    if buffer:
        yield buffer
