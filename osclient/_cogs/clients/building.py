from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import references


class BuildInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class BuildConfigInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class BuildsNamespacer(Protocol):
    def builds(self, namespace: references.Namespace = None) -> BuildInterface: ...


class BuildConfigsNamespacer(Protocol):
    def build_configs(self, namespace: references.Namespace = None) -> BuildConfigInterface: ...


class Builds(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.BUILDS


class BuildConfigs(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.BUILD_CONFIGS
