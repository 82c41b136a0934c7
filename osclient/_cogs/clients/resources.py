"""
The generic verbs of the resource sub-clients: list, get, create, etc.

Every resource family supports its own subset of the verbs. The sub-clients
are composed of the verb implementations below, and the capability protocols
of the families are composed of the verb protocols -- so that the callers
can depend on as little as they need (e.g. only on listing & watching).

The sub-clients are cheap: they hold only a reference to the parent client
and the namespace, and are created anew on every accessor call.
"""
import logging
from typing import TYPE_CHECKING, AsyncIterator, ClassVar, Mapping, Optional, Protocol

from osclient._cogs.clients import errors, rest
from osclient._cogs.structs import bodies, references

if TYPE_CHECKING:
    from osclient._cogs.clients.client import Client

logger = logging.getLogger(__name__)


class ListInterface(Protocol):
    async def list(
            self,
            *,
            label_selector: Optional[str] = None,
            field_selector: Optional[str] = None,
    ) -> bodies.RawBody: ...


class GetInterface(Protocol):
    async def get(self, name: str) -> bodies.RawBody: ...


class CreateInterface(Protocol):
    async def create(self, body: bodies.RawInput) -> bodies.RawBody: ...


class UpdateInterface(Protocol):
    async def update(self, body: bodies.RawInput) -> bodies.RawBody: ...


class DeleteInterface(Protocol):
    async def delete(self, name: str) -> None: ...


class WatchInterface(Protocol):
    def watch(
            self,
            *,
            label_selector: Optional[str] = None,
            field_selector: Optional[str] = None,
            resource_version: Optional[str] = None,
    ) -> AsyncIterator[bodies.RawEvent]: ...


class ResourceClient:
    """
    A base for the sub-clients bound to one resource family and namespace.
    """
    resource: ClassVar[references.Resource]

    def __init__(
            self,
            client: "Client",
            namespace: references.Namespace = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._namespace = namespace if self.resource.namespaced else None

    def __repr__(self) -> str:
        where = f'in {self._namespace!r}' if self._namespace is not None else 'cluster-wide'
        return f'<{self.__class__.__name__} {where}>'

    @property
    def namespace(self) -> references.Namespace:
        return self._namespace

    @property
    def transport(self) -> rest.RESTClient:
        return self._client.transport

    def get_url(
            self,
            *,
            name: Optional[str] = None,
            watch: bool = False,
            params: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.transport.build_url(self.resource, namespace=self._namespace,
                                        name=name, watch=watch, params=params)


class Lister(ResourceClient):
    async def list(
            self,
            *,
            label_selector: Optional[str] = None,
            field_selector: Optional[str] = None,
    ) -> bodies.RawBody:
        params = self.transport.selector_params(
            label_selector=label_selector,
            field_selector=field_selector,
        )
        result: bodies.RawBody = await self.transport.get(self.get_url(params=params))
        return result


class Getter(ResourceClient):
    async def get(self, name: str) -> bodies.RawBody:
        result: bodies.RawBody = await self.transport.get(self.get_url(name=name))
        return result


class Creator(ResourceClient):
    async def create(self, body: bodies.RawInput) -> bodies.RawBody:
        result: bodies.RawBody = await self.transport.post(self.get_url(), payload=body)
        return result


class Updater(ResourceClient):
    async def update(self, body: bodies.RawInput) -> bodies.RawBody:
        name = bodies.get_name(body)
        result: bodies.RawBody = await self.transport.put(self.get_url(name=name), payload=body)
        return result


class Deleter(ResourceClient):
    async def delete(self, name: str) -> None:
        await self.transport.delete(self.get_url(name=name))


class Watcher(ResourceClient):
    async def watch(
            self,
            *,
            label_selector: Optional[str] = None,
            field_selector: Optional[str] = None,
            resource_version: Optional[str] = None,
    ) -> AsyncIterator[bodies.RawEvent]:
        """
        Stream the watch-events until the server closes the stream.

        The stream is not restarted: the callers decide on how to continue,
        usually by listing the objects and watching from the listed version.
        """
        params = self.transport.selector_params(
            label_selector=label_selector,
            field_selector=field_selector,
        )
        if resource_version is not None:
            params['resourceVersion'] = resource_version

        where = f'in {self._namespace!r}' if self._namespace is not None else 'cluster-wide'
        logger.debug(f"Starting the watch-stream for {self.resource} {where}.")
        try:
            async for raw_input in self.transport.stream(self.get_url(watch=True, params=params)):
                raw_type = raw_input.get('type')
                raw_object = raw_input.get('object')
                if raw_type == 'ERROR':
                    raise errors.WatchingError(f"Error in the watch-stream: {raw_object}")
                yield bodies.RawEvent(type=raw_type, object=raw_object)
        finally:
            logger.debug(f"Stopping the watch-stream for {self.resource} {where}.")
