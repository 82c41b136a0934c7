import functools

import click.testing
import pytest

from osclient.cli import main


@pytest.fixture(autouse=True)
def no_logging_configuration(mocker):
    # Otherwise, every invocation adds one more handler to the root logger.
    return mocker.patch('osclient._cogs.helpers.loggers.configure')


@pytest.fixture(autouse=True)
def no_local_credentials(mocker):
    mocker.patch('osclient._cogs.configs.kubeconfig.has_kubeconfig', return_value=False)
    mocker.patch('osclient._cogs.configs.kubeconfig.has_service_account', return_value=False)


@pytest.fixture()
def runner():
    runner = click.testing.CliRunner()
    return runner


@pytest.fixture()
def invoke(runner):
    return functools.partial(runner.invoke, main)
