"""
Rudimentary loading of the connection configs from the well-known sources.

The client avoids bringing too much logic for proper authentication,
especially all the complex auth-providers: only the raw data from
kubeconfig files and from the in-cluster service accounts are supported.
"""
import collections.abc
import os
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

import yaml

from osclient._cogs.configs import configuration

SERVICE_ACCOUNT_DIR = '/var/run/secrets/kubernetes.io/serviceaccount'
DEFAULT_KUBECONFIG = '~/.kube/config'


def has_kubeconfig() -> bool:
    env_var_set = bool(os.environ.get('KUBECONFIG'))
    file_exists = os.path.exists(os.path.expanduser(DEFAULT_KUBECONFIG))
    return env_var_set or file_exists


def has_service_account() -> bool:
    return os.path.exists(os.path.join(SERVICE_ACCOUNT_DIR, 'token'))


def load_kubeconfig(
        paths: Optional[Sequence[str]] = None,
        *,
        context: Optional[str] = None,
) -> configuration.Config:
    """
    Get the raw connection data from the kubeconfig files.

    If the paths are not specified, they are taken from ``$KUBECONFIG``
    (a list separated with ``os.pathsep``), or from ``~/.kube/config``.

    The files are merged: the first value of every named entry wins.
    The current context is used unless another one is explicitly requested.
    No token retrieval or refreshing is performed: only the stored data are used.
    """

    # As per https://kubernetes.io/docs/concepts/configuration/organize-cluster-access-kubeconfig/
    if paths is None:
        kubeconfig = os.environ.get('KUBECONFIG')
        if not kubeconfig and os.path.exists(os.path.expanduser(DEFAULT_KUBECONFIG)):
            kubeconfig = DEFAULT_KUBECONFIG
        if not kubeconfig:
            raise configuration.ConfigError("No kubeconfig: neither $KUBECONFIG nor ~/.kube/config.")
        paths = [path.strip() for path in kubeconfig.split(os.pathsep)]
    paths = [os.path.expanduser(path) for path in paths if path]

    # As prescribed: if the file is absent or non-deserialisable, then fail. The first value wins.
    current_context: Optional[str] = None
    contexts: Dict[str, Mapping[str, Any]] = {}
    clusters: Dict[str, Mapping[str, Any]] = {}
    users: Dict[str, Mapping[str, Any]] = {}
    for path in paths:

        try:
            with open(path, encoding='utf-8') as f:
                config = yaml.safe_load(f.read()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise configuration.ConfigError(f"Cannot read the kubeconfig {path!r}: {e}") from e
        if not isinstance(config, collections.abc.Mapping):
            raise configuration.ConfigError(f"The kubeconfig {path!r} is not a mapping.")

        if current_context is None:
            current_context = config.get('current-context')
        for name, entry in _iter_named(config, 'contexts', 'context', path=path):
            contexts.setdefault(name, entry)
        for name, entry in _iter_named(config, 'clusters', 'cluster', path=path):
            clusters.setdefault(name, entry)
        for name, entry in _iter_named(config, 'users', 'user', path=path):
            users.setdefault(name, entry)

    # Once fully parsed, use the requested or the current context only.
    context_name = context if context is not None else current_context
    if context_name is None:
        raise configuration.ConfigError("Current context is not set in kubeconfigs.")
    if context_name not in contexts:
        raise configuration.ConfigError(f"Context {context_name!r} is not found in kubeconfigs.")
    ctx = contexts[context_name]
    cluster = clusters.get(str(ctx['cluster']), {}) if ctx.get('cluster') is not None else {}
    user = users.get(str(ctx['user']), {}) if ctx.get('user') is not None else {}

    # Unlike the full-featured clients, we do not make a fake API request to refresh the token.
    provider = _as_mapping(user.get('auth-provider'), 'auth-provider')
    provider_token = _as_mapping(provider.get('config'), 'auth-provider config').get('access-token')

    # Map the retrieved fields into the config object.
    return configuration.Config(
        host=cluster.get('server') or '',
        insecure=bool(cluster.get('insecure-skip-tls-verify')),
        ca_path=cluster.get('certificate-authority'),
        ca_data=_as_bytes(cluster.get('certificate-authority-data')),
        cert_path=user.get('client-certificate'),
        cert_data=_as_bytes(user.get('client-certificate-data')),
        key_path=user.get('client-key'),
        key_data=_as_bytes(user.get('client-key-data')),
        username=user.get('username'),
        password=user.get('password'),
        bearer_token=user.get('token') or provider_token,
        default_namespace=ctx.get('namespace'),
    )


def in_cluster_config() -> configuration.Config:
    """
    Get the connection data of the pod's service account.
    """
    token_path = os.path.join(SERVICE_ACCOUNT_DIR, 'token')
    ns_path = os.path.join(SERVICE_ACCOUNT_DIR, 'namespace')
    ca_path = os.path.join(SERVICE_ACCOUNT_DIR, 'ca.crt')

    if not os.path.exists(token_path):
        raise configuration.ConfigError("Not running in a cluster: no service account token.")

    with open(token_path, encoding='utf-8') as f:
        token = f.read().strip()

    namespace: Optional[str] = None
    if os.path.exists(ns_path):
        with open(ns_path, encoding='utf-8') as f:
            namespace = f.read().strip()

    host = os.environ.get('KUBERNETES_SERVICE_HOST')
    port = os.environ.get('KUBERNETES_SERVICE_PORT', '443')
    return configuration.Config(
        host=f'https://{host}:{port}' if host else 'https://kubernetes.default.svc',
        ca_path=ca_path if os.path.exists(ca_path) else None,
        bearer_token=token or None,
        default_namespace=namespace or None,
    )


def _as_bytes(value: Optional[str]) -> Optional[bytes]:
    return value.encode('ascii') if value is not None else None


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    """ Treat the absent or null sub-mappings as empty, and fail on malformed ones. """
    if value is None:
        return {}
    if not isinstance(value, collections.abc.Mapping):
        raise configuration.ConfigError(f"The kubeconfig's {what} is not a mapping: {value!r}")
    return value


def _iter_named(
        config: Mapping[str, Any],
        section: str,
        field: str,
        *,
        path: str,
) -> Iterator[Tuple[str, Mapping[str, Any]]]:
    items = config.get(section) or []
    if not isinstance(items, list):
        raise configuration.ConfigError(f"The kubeconfig {path!r} has malformed {section}.")
    for item in items:
        if not isinstance(item, collections.abc.Mapping) or not item.get('name'):
            raise configuration.ConfigError(
                f"The kubeconfig {path!r} has a malformed entry in {section}: {item!r}")
        yield str(item['name']), _as_mapping(item.get(field), f"{section[:-1]} {item['name']!r}")
