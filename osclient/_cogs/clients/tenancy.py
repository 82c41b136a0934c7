from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import references


class ProjectInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    Protocol,
):
    pass


class ProjectsInterface(Protocol):
    def projects(self) -> ProjectInterface: ...


class Projects(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
):
    """ Projects are cluster-scoped: they are the namespaces themselves. """
    resource = references.PROJECTS
