"""
The main module of the client for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the users. So, we export the individual functions.

from osclient._cogs.helpers.versions import (
    version as __version__,
    VersionInfo,
)
from osclient._cogs.structs.bodies import (
    RawBody,
    RawEvent,
    RawEventType,
)
from osclient._cogs.structs.codecs import (
    Codec,
    JSONCodec,
)
from osclient._cogs.structs.latest import (
    LEGACY_VERSION,
    VERSION,
    VERSIONS,
    UnknownVersionError,
    VersionInterfaces,
    interfaces_for,
)
from osclient._cogs.structs.references import (
    Namespace,
    Resource,
)
from osclient._cogs.configs.configuration import (
    Config,
    ConfigError,
)
from osclient._cogs.configs.kubeconfig import (
    load_kubeconfig,
    in_cluster_config,
)
from osclient._cogs.clients.errors import (
    APIError,
    APIForbiddenError,
    APIConflictError,
    APINotFoundError,
    APIUnauthorizedError,
    WatchingError,
)
from osclient._cogs.clients.rest import (
    RESTClient,
    rest_client_for,
)
from osclient._cogs.clients.useragents import (
    RuntimeEnvironment,
    default_openshift_user_agent,
)
from osclient._cogs.clients.resources import (
    ListInterface,
    GetInterface,
    CreateInterface,
    UpdateInterface,
    DeleteInterface,
    WatchInterface,
)
from osclient._cogs.clients.building import (
    BuildInterface,
    BuildConfigInterface,
    BuildsNamespacer,
    BuildConfigsNamespacer,
)
from osclient._cogs.clients.imaging import (
    ImageInterface,
    ImageRepositoryInterface,
    ImageRepositoryMappingInterface,
    ImageRepositoryTagInterface,
    ImagesNamespacer,
    ImageRepositoriesNamespacer,
    ImageRepositoryMappingsNamespacer,
    ImageRepositoryTagsNamespacer,
)
from osclient._cogs.clients.deploying import (
    DeploymentInterface,
    DeploymentConfigInterface,
    DeploymentsNamespacer,
    DeploymentConfigsNamespacer,
)
from osclient._cogs.clients.routing import (
    RouteInterface,
    RoutesNamespacer,
)
from osclient._cogs.clients.identities import (
    UserInterface,
    UserIdentityMappingInterface,
    UsersInterface,
    UserIdentityMappingsInterface,
)
from osclient._cogs.clients.tenancy import (
    ProjectInterface,
    ProjectsInterface,
)
from osclient._cogs.clients.templating import (
    TemplateInterface,
    TemplateConfigInterface,
    TemplatesNamespacer,
    TemplateConfigsNamespacer,
)
from osclient._cogs.clients.authorization import (
    PolicyInterface,
    PolicyBindingInterface,
    RoleInterface,
    RoleBindingInterface,
    ResourceAccessReviewInterface,
    SubjectAccessReviewInterface,
    PoliciesNamespacer,
    PolicyBindingsNamespacer,
    RolesNamespacer,
    RoleBindingsNamespacer,
    ResourceAccessReviewsNamespacer,
    RootResourceAccessReviewsInterface,
    SubjectAccessReviewsNamespacer,
)
from osclient._cogs.clients.client import (
    DEFAULT_PREFIX,
    Client,
    Interface,
    new,
    new_or_die,
    set_openshift_defaults,
)

__all__ = [
    '__version__', 'VersionInfo',
    'RawBody', 'RawEvent', 'RawEventType',
    'Codec', 'JSONCodec',
    'LEGACY_VERSION', 'VERSION', 'VERSIONS',
    'UnknownVersionError', 'VersionInterfaces', 'interfaces_for',
    'Namespace', 'Resource',
    'Config', 'ConfigError',
    'load_kubeconfig', 'in_cluster_config',
    'APIError', 'APIForbiddenError', 'APIConflictError',
    'APINotFoundError', 'APIUnauthorizedError', 'WatchingError',
    'RESTClient', 'rest_client_for',
    'RuntimeEnvironment', 'default_openshift_user_agent',
    'ListInterface', 'GetInterface', 'CreateInterface',
    'UpdateInterface', 'DeleteInterface', 'WatchInterface',
    'BuildInterface', 'BuildConfigInterface',
    'BuildsNamespacer', 'BuildConfigsNamespacer',
    'ImageInterface', 'ImageRepositoryInterface',
    'ImageRepositoryMappingInterface', 'ImageRepositoryTagInterface',
    'ImagesNamespacer', 'ImageRepositoriesNamespacer',
    'ImageRepositoryMappingsNamespacer', 'ImageRepositoryTagsNamespacer',
    'DeploymentInterface', 'DeploymentConfigInterface',
    'DeploymentsNamespacer', 'DeploymentConfigsNamespacer',
    'RouteInterface', 'RoutesNamespacer',
    'UserInterface', 'UserIdentityMappingInterface',
    'UsersInterface', 'UserIdentityMappingsInterface',
    'ProjectInterface', 'ProjectsInterface',
    'TemplateInterface', 'TemplateConfigInterface',
    'TemplatesNamespacer', 'TemplateConfigsNamespacer',
    'PolicyInterface', 'PolicyBindingInterface',
    'RoleInterface', 'RoleBindingInterface',
    'ResourceAccessReviewInterface', 'SubjectAccessReviewInterface',
    'PoliciesNamespacer', 'PolicyBindingsNamespacer',
    'RolesNamespacer', 'RoleBindingsNamespacer',
    'ResourceAccessReviewsNamespacer', 'RootResourceAccessReviewsInterface',
    'SubjectAccessReviewsNamespacer',
    'DEFAULT_PREFIX', 'Client', 'Interface',
    'new', 'new_or_die', 'set_openshift_defaults',
]
