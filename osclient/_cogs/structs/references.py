import dataclasses
import urllib.parse
from typing import List, Mapping, Optional

# A namespace reference usable in the API calls. `None` means cluster-wide API calls.
Namespace = Optional[str]


@dataclasses.dataclass(frozen=True)
class Resource:
    """
    A reference to a resource family of the API, e.g. builds or routes.

    It is used to form the API URLs. The API only needs the plural name
    of the resource; the prefix & version come from the client's config.
    """

    plural: str
    """
    The resource's plural name as in the legacy API; e.g. ``"buildConfigs"``.
    The newer API versions use the lower-cased form; e.g. ``"buildconfigs"``.
    """

    kind: str
    """
    The resource's kind (as in YAML files); e.g. ``"BuildConfig"``.
    """

    namespaced: bool = True
    """
    Whether the resource is namespaced (``True``) or cluster-scoped (``False``).
    """

    def __repr__(self) -> str:
        return self.plural

    def get_url(
            self,
            *,
            prefix: str,
            version: str,
            legacy: bool = False,
            namespace: Namespace = None,
            name: Optional[str] = None,
            subresource: Optional[str] = None,
            watch: bool = False,
            params: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Build a URL path (with the query) to be used with the API.

        If the namespace is not set, a cluster-wide URL is returned.
        For cluster-scoped resources, the namespace is ignored.

        In the legacy mode, the namespace goes to the query parameters,
        and the watch-streams have their own root path (``/watch/...``).
        Otherwise, the namespace is a path segment, and the watch-streams
        are the regular lists with the ``?watch=true`` query parameter.

        Params go to the query parameters (``?param1=value1&param2=value2...``).
        """
        if subresource is not None and name is None:
            raise ValueError("Subresources can be used only with specific resources by their name.")

        namespace = namespace if self.namespaced and namespace else None
        query = dict(params or {})
        if watch and not legacy:
            query['watch'] = 'true'
        if namespace is not None and legacy:
            query['namespace'] = namespace

        parts: List[Optional[str]] = [
            prefix.rstrip('/'),
            version,
            'watch' if watch and legacy else None,
            'namespaces' if namespace is not None and not legacy else None,
            namespace if namespace is not None and not legacy else None,
            self.plural if legacy else self.plural.lower(),
            urllib.parse.quote(name, safe=':') if name is not None else None,
            subresource,
        ]

        querystring = urllib.parse.urlencode(query, encoding='utf-8') if query else ''
        path = '/'.join([part for part in parts if part])
        path = path if path.startswith('/') else '/' + path
        return path + ('?' if querystring else '') + querystring


BUILDS = Resource('builds', 'Build')
BUILD_CONFIGS = Resource('buildConfigs', 'BuildConfig')
IMAGES = Resource('images', 'Image')
IMAGE_REPOSITORIES = Resource('imageRepositories', 'ImageRepository')
IMAGE_REPOSITORY_MAPPINGS = Resource('imageRepositoryMappings', 'ImageRepositoryMapping')
IMAGE_REPOSITORY_TAGS = Resource('imageRepositoryTags', 'ImageRepositoryTag')
DEPLOYMENTS = Resource('deployments', 'Deployment')
DEPLOYMENT_CONFIGS = Resource('deploymentConfigs', 'DeploymentConfig')
GENERATE_DEPLOYMENT_CONFIGS = Resource('generateDeploymentConfigs', 'DeploymentConfig')
DEPLOYMENT_CONFIG_ROLLBACKS = Resource('deploymentConfigRollbacks', 'DeploymentConfigRollback')
ROUTES = Resource('routes', 'Route')
USERS = Resource('users', 'User', namespaced=False)
USER_IDENTITY_MAPPINGS = Resource('userIdentityMappings', 'UserIdentityMapping', namespaced=False)
PROJECTS = Resource('projects', 'Project', namespaced=False)
TEMPLATES = Resource('templates', 'Template')
TEMPLATE_CONFIGS = Resource('templateConfigs', 'Template')
POLICIES = Resource('policies', 'Policy')
POLICY_BINDINGS = Resource('policyBindings', 'PolicyBinding')
ROLES = Resource('roles', 'Role')
ROLE_BINDINGS = Resource('roleBindings', 'RoleBinding')
RESOURCE_ACCESS_REVIEWS = Resource('resourceAccessReviews', 'ResourceAccessReview')
ROOT_RESOURCE_ACCESS_REVIEWS = Resource('resourceAccessReviews', 'ResourceAccessReview',
                                        namespaced=False)
SUBJECT_ACCESS_REVIEWS = Resource('subjectAccessReviews', 'SubjectAccessReview')
