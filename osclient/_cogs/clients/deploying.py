"""
Deployments and the deployment configs, from which they are generated.
"""
from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import bodies, references


class DeploymentInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class DeploymentConfigInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    async def generate(self, name: str) -> bodies.RawBody: ...

    async def rollback(self, body: bodies.RawInput) -> bodies.RawBody: ...


class DeploymentsNamespacer(Protocol):
    def deployments(self, namespace: references.Namespace = None) -> DeploymentInterface: ...


class DeploymentConfigsNamespacer(Protocol):
    def deployment_configs(
            self, namespace: references.Namespace = None,
    ) -> DeploymentConfigInterface: ...


class Deployments(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.DEPLOYMENTS


class DeploymentConfigs(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.DEPLOYMENT_CONFIGS

    async def generate(self, name: str) -> bodies.RawBody:
        """
        Generate a new version of the deployment config, as the server sees it.

        Nothing is stored: the result is only returned to the caller,
        who can then update the deployment config with it.
        """
        url = self.transport.build_url(references.GENERATE_DEPLOYMENT_CONFIGS,
                                       namespace=self.namespace, name=name)
        result: bodies.RawBody = await self.transport.get(url)
        return result

    async def rollback(self, body: bodies.RawInput) -> bodies.RawBody:
        """
        Produce a deployment config rolled back to an earlier deployment.

        Like with generation, nothing is stored, only returned.
        """
        url = self.transport.build_url(references.DEPLOYMENT_CONFIG_ROLLBACKS,
                                       namespace=self.namespace)
        result: bodies.RawBody = await self.transport.post(url, payload=body)
        return result
