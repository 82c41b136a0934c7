"""
Authorization policies, roles, their bindings, and the access reviews.

The reviews are the questions to the server ("who can do this?",
"can this user do this?"): they are created, and the answer is returned
as the created object. Nothing is stored.
"""
from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import references


class PolicyInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class PolicyBindingInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class RoleInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    Protocol,
):
    pass


class RoleBindingInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    Protocol,
):
    pass


class ResourceAccessReviewInterface(resources.CreateInterface, Protocol):
    pass


class SubjectAccessReviewInterface(resources.CreateInterface, Protocol):
    pass


class PoliciesNamespacer(Protocol):
    def policies(self, namespace: references.Namespace = None) -> PolicyInterface: ...


class PolicyBindingsNamespacer(Protocol):
    def policy_bindings(self, namespace: references.Namespace = None) -> PolicyBindingInterface: ...


class RolesNamespacer(Protocol):
    def roles(self, namespace: references.Namespace = None) -> RoleInterface: ...


class RoleBindingsNamespacer(Protocol):
    def role_bindings(self, namespace: references.Namespace = None) -> RoleBindingInterface: ...


class ResourceAccessReviewsNamespacer(Protocol):
    def resource_access_reviews(
            self, namespace: references.Namespace = None,
    ) -> ResourceAccessReviewInterface: ...


class RootResourceAccessReviewsInterface(Protocol):
    def root_resource_access_reviews(self) -> ResourceAccessReviewInterface: ...


class SubjectAccessReviewsNamespacer(Protocol):
    def subject_access_reviews(
            self, namespace: references.Namespace = None,
    ) -> SubjectAccessReviewInterface: ...


class Policies(
    resources.Lister,
    resources.Getter,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.POLICIES


class PolicyBindings(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.POLICY_BINDINGS


class Roles(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
):
    resource = references.ROLES


class RoleBindings(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
):
    resource = references.ROLE_BINDINGS


class ResourceAccessReviews(resources.Creator):
    resource = references.RESOURCE_ACCESS_REVIEWS


class ClusterResourceAccessReviews(resources.Creator):
    resource = references.ROOT_RESOURCE_ACCESS_REVIEWS


class SubjectAccessReviews(resources.Creator):
    resource = references.SUBJECT_ACCESS_REVIEWS
