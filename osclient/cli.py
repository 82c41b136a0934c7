import asyncio
import dataclasses
import functools
import json
from typing import Any, Callable, Dict, Optional, Sequence

import click
import yaml

from osclient._cogs.clients import client, useragents
from osclient._cogs.configs import configuration, kubeconfig
from osclient._cogs.helpers import loggers
from osclient._cogs.structs import latest, references

# The families available for listing/getting, by their CLI names (as in the API, lower-cased).
Accessor = Callable[[client.Client, references.Namespace], Any]
ACCESSORS: Dict[str, Accessor] = {
    'builds': lambda c, ns: c.builds(ns),
    'buildconfigs': lambda c, ns: c.build_configs(ns),
    'images': lambda c, ns: c.images(ns),
    'imagerepositories': lambda c, ns: c.image_repositories(ns),
    'deployments': lambda c, ns: c.deployments(ns),
    'deploymentconfigs': lambda c, ns: c.deployment_configs(ns),
    'routes': lambda c, ns: c.routes(ns),
    'users': lambda c, ns: c.users(),
    'useridentitymappings': lambda c, ns: c.user_identity_mappings(),
    'projects': lambda c, ns: c.projects(),
    'templates': lambda c, ns: c.templates(ns),
    'policies': lambda c, ns: c.policies(ns),
    'policybindings': lambda c, ns: c.policy_bindings(ns),
    'roles': lambda c, ns: c.roles(ns),
    'rolebindings': lambda c, ns: c.role_bindings(ns),
}


@dataclasses.dataclass()
class ConnectionOptions:
    """ The connection options of the group, as passed to the commands. """
    server: Optional[str] = None
    token: Optional[str] = None
    kubeconfig: Optional[str] = None
    context: Optional[str] = None
    api_version: Optional[str] = None
    insecure: bool = False

    def load_config(self) -> configuration.Config:
        config: configuration.Config
        if self.server:
            config = configuration.Config(host=self.server)
        elif self.kubeconfig or self.context or kubeconfig.has_kubeconfig():
            paths = self.kubeconfig.split(',') if self.kubeconfig else None
            config = kubeconfig.load_kubeconfig(paths, context=self.context)
        elif kubeconfig.has_service_account():
            config = kubeconfig.in_cluster_config()
        else:
            raise click.UsageError("No server, no kubeconfig, no service account: nowhere to connect.")

        if self.token:
            config.bearer_token = self.token
        if self.api_version:
            config.version = self.api_version
        if self.insecure:
            config.insecure = True
        return config


class LogFormatParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.name.lower() for v in loggers.LogFormat])

    def convert(self, value: Any, param: Any, ctx: Any) -> loggers.LogFormat:
        name: str = super().convert(value, param, ctx)
        return loggers.LogFormat[name.upper()]


def logging_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to configure logging in all commands the same way."""
    @click.option('-v', '--verbose', is_flag=True)
    @click.option('-d', '--debug', is_flag=True)
    @click.option('-q', '--quiet', is_flag=True)
    @click.option('--log-format', type=LogFormatParamType(), default='full')
    @functools.wraps(fn)  # to preserve other opts/args
    def wrapper(verbose: bool, quiet: bool, debug: bool,
                log_format: loggers.LogFormat = loggers.LogFormat.FULL,
                *args: Any, **kwargs: Any) -> Any:
        loggers.configure(debug=debug, verbose=verbose, quiet=quiet, log_format=log_format)
        return fn(*args, **kwargs)

    return wrapper


@click.version_option(prog_name='osclient')
@click.group(name='osclient', context_settings=dict(
    auto_envvar_prefix='OSCLIENT',
))
@click.option('-s', '--server', type=str, help="The API server's URL or host:port.")
@click.option('--token', type=str, help="The bearer token for the API server.")
@click.option('--kubeconfig', type=str, help="Comma-separated paths to the kubeconfig files.")
@click.option('--context', type=str, help="The kubeconfig context to use.")
@click.option('--api-version', type=click.Choice(latest.VERSIONS))
@click.option('--insecure-skip-tls-verify', 'insecure', is_flag=True)
@click.pass_context
def main(
        ctx: click.Context,
        server: Optional[str],
        token: Optional[str],
        kubeconfig: Optional[str],
        context: Optional[str],
        api_version: Optional[str],
        insecure: bool,
) -> None:
    ctx.obj = ConnectionOptions(
        server=server,
        token=token,
        kubeconfig=kubeconfig,
        context=context,
        api_version=api_version,
        insecure=insecure,
    )


@main.command(name='user-agent')
def user_agent() -> None:
    """ Print the default user agent of this client. """
    click.echo(useragents.default_openshift_user_agent())


@main.command(name='api-versions')
def api_versions() -> None:
    """ Print the recognized API versions; the default one is marked. """
    for version in latest.VERSIONS:
        marker = ' (default)' if version == latest.VERSION else ''
        click.echo(f'{version}{marker}')


@main.command()
@logging_options
@click.option('-n', '--namespace', type=str)
@click.option('-A', '--all-namespaces', 'clusterwide', is_flag=True)
@click.option('-l', '--selector', 'label_selector', type=str)
@click.option('-o', '--output', type=click.Choice(['yaml', 'json']), default='yaml')
@click.argument('resource', type=click.Choice(sorted(ACCESSORS), case_sensitive=False))
@click.argument('names', nargs=-1)
@click.pass_obj
def get(
        options: ConnectionOptions,
        resource: str,
        names: Sequence[str],
        namespace: Optional[str],
        clusterwide: bool,
        label_selector: Optional[str],
        output: str,
) -> None:
    """ List the objects of a resource family, or get the named ones. """
    if namespace and clusterwide:
        raise click.UsageError("Either --namespace or --all-namespaces can be used, not both.")
    if names and label_selector:
        raise click.UsageError("Either the names or the --selector can be used, not both.")

    config = options.load_config()
    namespace = None if clusterwide else namespace or config.default_namespace
    results = asyncio.run(_get(
        config=config,
        accessor=ACCESSORS[resource.lower()],
        namespace=namespace,
        names=names,
        label_selector=label_selector,
    ))
    if output == 'json':
        click.echo(json.dumps(results[0] if len(results) == 1 else list(results), indent=2))
    else:
        click.echo(yaml.safe_dump_all(results, default_flow_style=False, sort_keys=False), nl=False)


async def _get(
        *,
        config: configuration.Config,
        accessor: Accessor,
        namespace: references.Namespace,
        names: Sequence[str],
        label_selector: Optional[str],
) -> Sequence[Any]:
    async with client.new_or_die(config) as api:
        family = accessor(api, namespace)
        if names:
            if not hasattr(family, 'get'):
                raise click.UsageError(f"The objects of {family.resource} cannot be fetched by name.")
            return [await family.get(name) for name in names]
        else:
            if not hasattr(family, 'list'):
                raise click.UsageError(f"The objects of {family.resource} cannot be listed.")
            return [await family.list(label_selector=label_selector)]
