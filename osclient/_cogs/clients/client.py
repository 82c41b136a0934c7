"""
The client facade: one accessor per resource family over a shared transport.

The accessors are trivial: they construct a sub-client bound to the client's
transport and (for the namespaced resources) to a namespace. All the actual
work of addressing, serialization, and HTTP is in the transport.
"""
import dataclasses
import logging
from typing import Any, Protocol

from osclient._cogs.clients import authorization, building, deploying, identities, imaging, \
                                   rest, routing, templating, tenancy, useragents
from osclient._cogs.configs import configuration
from osclient._cogs.structs import latest, references

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = '/osapi'


class Interface(
    building.BuildsNamespacer,
    building.BuildConfigsNamespacer,
    imaging.ImagesNamespacer,
    imaging.ImageRepositoriesNamespacer,
    imaging.ImageRepositoryMappingsNamespacer,
    imaging.ImageRepositoryTagsNamespacer,
    deploying.DeploymentsNamespacer,
    deploying.DeploymentConfigsNamespacer,
    routing.RoutesNamespacer,
    identities.UsersInterface,
    identities.UserIdentityMappingsInterface,
    tenancy.ProjectsInterface,
    authorization.PoliciesNamespacer,
    authorization.RolesNamespacer,
    authorization.RoleBindingsNamespacer,
    authorization.PolicyBindingsNamespacer,
    authorization.ResourceAccessReviewsNamespacer,
    authorization.RootResourceAccessReviewsInterface,
    authorization.SubjectAccessReviewsNamespacer,
    templating.TemplatesNamespacer,
    templating.TemplateConfigsNamespacer,
    Protocol,
):
    """
    All the resource families of the API, as one capability.

    The callers are encouraged to depend on the individual namespacers
    (e.g. :class:`BuildsNamespacer`) if they need only some of the families.
    """


class Client:
    """
    An API client for builds, deployments, templates, routes, images, etc.

    It allows operations such as list, get, update, and delete on the objects
    of these families, as supported by every specific family.
    """

    transport: rest.RESTClient

    def __init__(self, transport: rest.RESTClient) -> None:
        super().__init__()
        self.transport = transport

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.transport.server}>'

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    def builds(self, namespace: references.Namespace = None) -> building.BuildInterface:
        return building.Builds(self, namespace)

    def build_configs(
            self, namespace: references.Namespace = None,
    ) -> building.BuildConfigInterface:
        return building.BuildConfigs(self, namespace)

    def images(self, namespace: references.Namespace = None) -> imaging.ImageInterface:
        return imaging.Images(self, namespace)

    def image_repositories(
            self, namespace: references.Namespace = None,
    ) -> imaging.ImageRepositoryInterface:
        return imaging.ImageRepositories(self, namespace)

    def image_repository_mappings(
            self, namespace: references.Namespace = None,
    ) -> imaging.ImageRepositoryMappingInterface:
        return imaging.ImageRepositoryMappings(self, namespace)

    def image_repository_tags(
            self, namespace: references.Namespace = None,
    ) -> imaging.ImageRepositoryTagInterface:
        return imaging.ImageRepositoryTags(self, namespace)

    def deployments(
            self, namespace: references.Namespace = None,
    ) -> deploying.DeploymentInterface:
        return deploying.Deployments(self, namespace)

    def deployment_configs(
            self, namespace: references.Namespace = None,
    ) -> deploying.DeploymentConfigInterface:
        return deploying.DeploymentConfigs(self, namespace)

    def routes(self, namespace: references.Namespace = None) -> routing.RouteInterface:
        return routing.Routes(self, namespace)

    def users(self) -> identities.UserInterface:
        return identities.Users(self)

    def user_identity_mappings(self) -> identities.UserIdentityMappingInterface:
        return identities.UserIdentityMappings(self)

    def projects(self) -> tenancy.ProjectInterface:
        return tenancy.Projects(self)

    def templates(self, namespace: references.Namespace = None) -> templating.TemplateInterface:
        return templating.Templates(self, namespace)

    def template_configs(
            self, namespace: references.Namespace = None,
    ) -> templating.TemplateConfigInterface:
        return templating.TemplateConfigs(self, namespace)

    def policies(self, namespace: references.Namespace = None) -> authorization.PolicyInterface:
        return authorization.Policies(self, namespace)

    def policy_bindings(
            self, namespace: references.Namespace = None,
    ) -> authorization.PolicyBindingInterface:
        return authorization.PolicyBindings(self, namespace)

    def roles(self, namespace: references.Namespace = None) -> authorization.RoleInterface:
        return authorization.Roles(self, namespace)

    def role_bindings(
            self, namespace: references.Namespace = None,
    ) -> authorization.RoleBindingInterface:
        return authorization.RoleBindings(self, namespace)

    def resource_access_reviews(
            self, namespace: references.Namespace = None,
    ) -> authorization.ResourceAccessReviewInterface:
        return authorization.ResourceAccessReviews(self, namespace)

    def root_resource_access_reviews(self) -> authorization.ResourceAccessReviewInterface:
        return authorization.ClusterResourceAccessReviews(self)

    def subject_access_reviews(
            self, namespace: references.Namespace = None,
    ) -> authorization.SubjectAccessReviewInterface:
        return authorization.SubjectAccessReviews(self, namespace)


def new(config: configuration.Config) -> Client:
    """
    Create a client for the given config.

    The passed config is not modified: the client uses its own defaulted copy.
    :class:`ConfigError` is raised if the provided configuration is not valid.
    """
    config = dataclasses.replace(config)
    set_openshift_defaults(config)
    transport = rest.rest_client_for(config)
    logger.debug(f"Created a client for {transport.server}{config.prefix}/{config.version}.")
    return Client(transport)


def new_or_die(config: configuration.Config) -> Client:
    """
    Create a client, or exit the process if the config is not valid.

    For the programs which cannot do anything without the client anyway.
    """
    try:
        return new(config)
    except configuration.ConfigError as e:
        logger.critical(f"Cannot create the client: {e}")
        raise SystemExit(str(e)) from e


def set_openshift_defaults(config: configuration.Config) -> None:
    """
    Fill the unset fields of the config with the defaults, in place.

    The unset strings are either ``None`` or empty. An explicitly set codec
    is kept as is; otherwise, the codec of the configured version is used.
    If the version is not recognized, the config remains unmodified.
    """
    prefix = config.prefix or DEFAULT_PREFIX
    user_agent = config.user_agent or useragents.default_openshift_user_agent()

    # TODO: negotiate the highest version supported by the server instead of the preferred one.
    version = config.version or latest.VERSION
    try:
        interfaces = latest.interfaces_for(version)
    except latest.UnknownVersionError as e:
        valid = ', '.join(latest.VERSIONS)
        raise configuration.ConfigError(
            f"API version {version!r} is not recognized (valid values: {valid})") from e

    config.prefix = prefix
    config.user_agent = user_agent
    config.version = version
    config.codec = config.codec if config.codec is not None else interfaces.codec
    config.legacy_behavior = version == latest.LEGACY_VERSION
