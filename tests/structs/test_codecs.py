import json

import pytest

import osclient
from osclient._cogs.structs.bodies import get_name


def test_codec_encodes_with_the_version():
    codec = osclient.JSONCodec('v1beta3')
    body = {'kind': 'Route'}
    assert json.loads(codec.encode(body)) == {'kind': 'Route', 'apiVersion': 'v1beta3'}
    assert body == {'kind': 'Route'}


def test_codec_keeps_the_explicit_version():
    codec = osclient.JSONCodec('v1beta3')
    encoded = codec.encode({'kind': 'Route', 'apiVersion': 'v1'})
    assert json.loads(encoded) == {'kind': 'Route', 'apiVersion': 'v1'}


@pytest.mark.parametrize('data, expected', [
    (b'{"kind": "Route"}', {'kind': 'Route'}),
    (b'[]', []),
    (b'', None),
])
def test_codec_decodes(data, expected):
    assert osclient.JSONCodec('v1beta1').decode(data) == expected


def test_codecs_are_equal_by_version():
    assert osclient.JSONCodec('v1beta1') == osclient.JSONCodec('v1beta1')
    assert osclient.JSONCodec('v1beta1') != osclient.JSONCodec('v1beta3')
    assert len({osclient.JSONCodec('v1beta1'), osclient.JSONCodec('v1beta1')}) == 1


def test_registry_of_versions():
    assert osclient.VERSIONS == ('v1beta1', 'v1beta3')
    assert osclient.VERSION == 'v1beta1'
    assert osclient.LEGACY_VERSION == 'v1beta1'


@pytest.mark.parametrize('version', osclient.VERSIONS)
def test_interfaces_of_known_versions(version):
    interfaces = osclient.interfaces_for(version)
    assert interfaces.version == version
    assert interfaces.codec == osclient.JSONCodec(version)


@pytest.mark.parametrize('version', ['', 'v1', 'V1BETA1'])
def test_interfaces_of_unknown_versions(version):
    with pytest.raises(osclient.UnknownVersionError):
        osclient.interfaces_for(version)


def test_names_of_bodies():
    assert get_name({'metadata': {'name': 'x'}}) == 'x'


@pytest.mark.parametrize('body', [
    {},
    {'metadata': None},
    {'metadata': {}},
    {'metadata': {'name': None}},
    {'metadata': {'name': ''}},
])
def test_names_of_nameless_bodies(body):
    with pytest.raises(ValueError):
        get_name(body)
