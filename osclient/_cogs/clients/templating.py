from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import references


class TemplateInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    Protocol,
):
    pass


class TemplateConfigInterface(resources.CreateInterface, Protocol):
    pass


class TemplatesNamespacer(Protocol):
    def templates(self, namespace: references.Namespace = None) -> TemplateInterface: ...


class TemplateConfigsNamespacer(Protocol):
    def template_configs(
            self, namespace: references.Namespace = None,
    ) -> TemplateConfigInterface: ...


class Templates(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
):
    resource = references.TEMPLATES


class TemplateConfigs(resources.Creator):
    """
    Template processing: the created "config" is the template with all
    parameters substituted, as returned by the server. Nothing is stored.
    """
    resource = references.TEMPLATE_CONFIGS
