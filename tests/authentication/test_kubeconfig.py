import base64

import pytest
import yaml

import osclient
from osclient._cogs.configs import kubeconfig

KUBECONFIG = {
    'current-context': 'ctx1',
    'contexts': [
        {'name': 'ctx1', 'context': {'cluster': 'c1', 'user': 'u1', 'namespace': 'ns1'}},
        {'name': 'ctx2', 'context': {'cluster': 'c2', 'user': 'u2'}},
    ],
    'clusters': [
        {'name': 'c1', 'cluster': {
            'server': 'https://c1:8443',
            'certificate-authority-data': base64.b64encode(b'ca1').decode(),
        }},
        {'name': 'c2', 'cluster': {'server': 'https://c2:8443', 'insecure-skip-tls-verify': True}},
    ],
    'users': [
        {'name': 'u1', 'user': {'token': 'token1'}},
        {'name': 'u2', 'user': {'username': 'user2', 'password': 'pass2'}},
    ],
}


@pytest.fixture()
def kubeconfig_path(tmp_path):
    path = tmp_path / 'config'
    path.write_text(yaml.safe_dump(KUBECONFIG))
    return str(path)


@pytest.fixture(autouse=True)
def no_default_kubeconfig(monkeypatch, tmp_path):
    monkeypatch.delenv('KUBECONFIG', raising=False)
    monkeypatch.setattr(kubeconfig, 'DEFAULT_KUBECONFIG', str(tmp_path / 'absent'))
    monkeypatch.setattr(kubeconfig, 'SERVICE_ACCOUNT_DIR', str(tmp_path / 'absent-sa'))


def test_current_context(kubeconfig_path):
    config = osclient.load_kubeconfig([kubeconfig_path])
    assert config.host == 'https://c1:8443'
    assert config.bearer_token == 'token1'
    assert config.ca_data == base64.b64encode(b'ca1')
    assert config.default_namespace == 'ns1'
    assert not config.insecure


def test_explicit_context(kubeconfig_path):
    config = osclient.load_kubeconfig([kubeconfig_path], context='ctx2')
    assert config.host == 'https://c2:8443'
    assert config.insecure
    assert config.username == 'user2'
    assert config.password == 'pass2'
    assert config.bearer_token is None
    assert config.default_namespace is None


def test_unknown_context(kubeconfig_path):
    with pytest.raises(osclient.ConfigError, match=r"'ctx9' is not found"):
        osclient.load_kubeconfig([kubeconfig_path], context='ctx9')


def test_no_current_context(tmp_path):
    path = tmp_path / 'config'
    path.write_text(yaml.safe_dump(dict(KUBECONFIG, **{'current-context': None})))
    with pytest.raises(osclient.ConfigError, match=r"Current context is not set"):
        osclient.load_kubeconfig([str(path)])


def test_kubeconfig_from_envvar(monkeypatch, kubeconfig_path):
    monkeypatch.setenv('KUBECONFIG', kubeconfig_path)
    config = osclient.load_kubeconfig()
    assert config.host == 'https://c1:8443'


def test_no_kubeconfig_at_all():
    assert not kubeconfig.has_kubeconfig()
    with pytest.raises(osclient.ConfigError, match=r"No kubeconfig"):
        osclient.load_kubeconfig()


def test_absent_file(tmp_path):
    with pytest.raises(osclient.ConfigError, match=r"Cannot read the kubeconfig"):
        osclient.load_kubeconfig([str(tmp_path / 'absent')])


def test_broken_file(tmp_path):
    path = tmp_path / 'config'
    path.write_text('{ this is: [not yaml')
    with pytest.raises(osclient.ConfigError, match=r"Cannot read the kubeconfig"):
        osclient.load_kubeconfig([str(path)])


def test_first_value_wins(tmp_path, kubeconfig_path):
    override = tmp_path / 'override'
    override.write_text(yaml.safe_dump({
        'current-context': 'ctx2',
        'clusters': [{'name': 'c1', 'cluster': {'server': 'https://other:443'}}],
    }))
    config = osclient.load_kubeconfig([str(override), kubeconfig_path])
    assert config.host == 'https://c2:8443'  # the context from the 1st file, the rest from the 2nd.

    config = osclient.load_kubeconfig([str(override), kubeconfig_path], context='ctx1')
    assert config.host == 'https://other:443'


def test_auth_provider_token(tmp_path):
    path = tmp_path / 'config'
    path.write_text(yaml.safe_dump({
        'current-context': 'ctx',
        'contexts': [{'name': 'ctx', 'context': {'cluster': 'c', 'user': 'u'}}],
        'clusters': [{'name': 'c', 'cluster': {'server': 'https://c'}}],
        'users': [{'name': 'u', 'user': {'auth-provider': {'config': {'access-token': 'tkn'}}}}],
    }))
    config = osclient.load_kubeconfig([str(path)])
    assert config.bearer_token == 'tkn'


def test_loaded_config_makes_a_client(kubeconfig_path):
    api = osclient.new(osclient.load_kubeconfig([kubeconfig_path]))
    assert api.transport.server == 'https://c1:8443'


def test_in_cluster_config(monkeypatch, tmp_path):
    sa_dir = tmp_path / 'sa'
    sa_dir.mkdir()
    (sa_dir / 'token').write_text('sa-token\n')
    (sa_dir / 'namespace').write_text('default\n')
    (sa_dir / 'ca.crt').write_text('-----BEGIN CERTIFICATE-----\n')
    monkeypatch.setattr(kubeconfig, 'SERVICE_ACCOUNT_DIR', str(sa_dir))
    monkeypatch.setenv('KUBERNETES_SERVICE_HOST', '10.0.0.1')
    monkeypatch.setenv('KUBERNETES_SERVICE_PORT', '6443')

    assert kubeconfig.has_service_account()
    config = osclient.in_cluster_config()
    assert config.host == 'https://10.0.0.1:6443'
    assert config.bearer_token == 'sa-token'
    assert config.default_namespace == 'default'
    assert config.ca_path == str(sa_dir / 'ca.crt')


def test_in_cluster_config_outside_of_a_cluster():
    assert not kubeconfig.has_service_account()
    with pytest.raises(osclient.ConfigError, match=r"Not running in a cluster"):
        osclient.in_cluster_config()


def _write(tmp_path, content) -> str:
    path = tmp_path / 'config'
    path.write_text(yaml.safe_dump(content))
    return str(path)


@pytest.mark.parametrize('user', [
    {'token': 'tkn', 'auth-provider': None},
    {'token': 'tkn', 'auth-provider': {'config': None}},
    {'token': 'tkn', 'auth-provider': {'name': 'oidc'}},
])
def test_null_sub_mappings_are_empty(tmp_path, user):
    path = _write(tmp_path, {
        'current-context': 'ctx',
        'contexts': [{'name': 'ctx', 'context': {'cluster': 'c', 'user': 'u'}}],
        'clusters': [{'name': 'c', 'cluster': {'server': 'https://c'}}],
        'users': [{'name': 'u', 'user': user}],
    })
    config = osclient.load_kubeconfig([path])
    assert config.host == 'https://c'
    assert config.bearer_token == 'tkn'


def test_null_entries_are_empty(tmp_path):
    path = _write(tmp_path, {
        'current-context': 'ctx',
        'contexts': [{'name': 'ctx', 'context': None}],
        'clusters': None,
        'users': [{'name': 'u', 'user': None}],
    })
    config = osclient.load_kubeconfig([path])
    assert config.host == ''
    assert config.bearer_token is None


@pytest.mark.parametrize('content', [
    ['not', 'a', 'mapping'],
    {'current-context': 'ctx', 'contexts': {'ctx': {}}},
    {'current-context': 'ctx', 'contexts': ['ctx']},
    {'current-context': 'ctx', 'contexts': [{'context': {}}]},
    {'current-context': 'ctx', 'contexts': [{'name': 'ctx', 'context': 'c'}]},
    {'current-context': 'ctx', 'contexts': [{'name': 'ctx', 'context': {'user': 'u'}}],
     'users': [{'name': 'u', 'user': {'auth-provider': 'oidc'}}]},
    {'current-context': 'ctx', 'contexts': [{'name': 'ctx', 'context': {'user': 'u'}}],
     'users': [{'name': 'u', 'user': {'auth-provider': {'config': ['x']}}}]},
])
def test_malformed_kubeconfigs(tmp_path, content):
    path = _write(tmp_path, content)
    with pytest.raises(osclient.ConfigError):
        osclient.load_kubeconfig([path])
