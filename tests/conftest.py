import dataclasses
import json
from typing import Any, Dict, List, Optional, Tuple

import aiohttp.test_utils
import aiohttp.web
import pytest

import osclient
from osclient._cogs.clients.useragents import RuntimeEnvironment


@dataclasses.dataclass(frozen=True)
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    data: Any


class FakeAPI:
    """
    A recording API server with the pre-defined responses.

    The responses are consumed in the order they were added for every
    method & path. A response can be a JSON-serialisable object, a list of
    objects for a JSON-lines stream, or a ready-made aiohttp response.
    Unexpected requests are answered with HTTP 404 and recorded anyway.

    Sample usage::

        async def test_me(fake_api, client):
            fake_api.add('get', '/osapi/v1beta1/builds', {'items': []})
            await client.builds().list()
            assert fake_api.requests[0].query == {}
    """

    url: str
    requests: List[RecordedRequest]

    def __init__(self) -> None:
        super().__init__()
        self.url = ''
        self.requests = []
        self._responses: Dict[Tuple[str, str], List[Any]] = {}

    def add(self, method: str, path: str, *responses: Any) -> None:
        self._responses.setdefault((method.lower(), path), []).extend(responses)

    async def handle(self, request: aiohttp.web.Request) -> aiohttp.web.StreamResponse:

        # The request's content can be read inside of the handler only. We preserve
        # the data into a conventional field, so that they could be asserted later.
        body = await request.read()
        try:
            data = json.loads(body) if body else None
        except json.JSONDecodeError:
            data = body.decode('utf-8')

        self.requests.append(RecordedRequest(
            method=request.method.lower(),
            path=request.path,
            query=dict(request.query),
            headers=dict(request.headers),
            data=data,
        ))

        queue = self._responses.get((request.method.lower(), request.path), [])
        if not queue:
            status = {'kind': 'Status', 'code': 404, 'message': 'not mocked'}
            return aiohttp.web.json_response(status, status=404)

        response = queue.pop(0)
        if isinstance(response, aiohttp.web.StreamResponse):
            return response
        elif isinstance(response, list):
            text = '\n'.join(json.dumps(item) for item in response)
            return aiohttp.web.Response(text=text, content_type='application/json')
        else:
            return aiohttp.web.json_response(response)


@pytest.fixture()
async def fake_api():
    api = FakeAPI()
    app = aiohttp.web.Application()
    app.router.add_route('*', '/{tail:.*}', api.handle)
    server = aiohttp.test_utils.TestServer(app)
    await server.start_server()
    api.url = f'http://{server.host}:{server.port}'
    try:
        yield api
    finally:
        await server.close()


@pytest.fixture(params=list(osclient.VERSIONS))
def version(request):
    return request.param


@pytest.fixture()
def legacy(version):
    return version == osclient.LEGACY_VERSION


@pytest.fixture()
async def client(fake_api, version):
    config = osclient.Config(host=fake_api.url, version=version, user_agent='tests/1.0')
    client = osclient.new(config)
    try:
        yield client
    finally:
        await client.close()


@pytest.fixture()
def environment():
    return RuntimeEnvironment(executable='/usr/local/bin/deployer', os='linux', arch='amd64')


@pytest.fixture()
def expected_path(version):
    """ The URL path as expected for a resource in the tested API version. """
    def fn(plural: str, namespace: Optional[str] = None, name: Optional[str] = None) -> str:
        if version == osclient.LEGACY_VERSION:
            parts = ['/osapi', version, plural, name]
        else:
            ns_parts = ['namespaces', namespace] if namespace else []
            parts = ['/osapi', version, *ns_parts, plural.lower(), name]
        return '/'.join(part for part in parts if part)
    return fn


@pytest.fixture()
def expected_query(version):
    """ The URL query as expected for a resource in the tested API version. """
    def fn(namespace: Optional[str] = None, **params: str) -> Dict[str, str]:
        if version == osclient.LEGACY_VERSION and namespace:
            return dict(params, namespace=namespace)
        else:
            return dict(params)
    return fn
