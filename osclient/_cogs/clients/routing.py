from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import references


class RouteInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class RoutesNamespacer(Protocol):
    def routes(self, namespace: references.Namespace = None) -> RouteInterface: ...


class Routes(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.ROUTES
