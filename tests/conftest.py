"""Shared test fixtures for hddcheck tests."""
import pytest

from hddcheck.core import config as config_module
from hddcheck.core.config import HddCheckConfig
from tests.samples import FakeRunner, sample_host


@pytest.fixture(autouse=True)
def _reset_config():
    """Make every test start from the default configuration."""
    config_module.set_config(None)
    yield
    config_module.set_config(None)


@pytest.fixture
def config():
    return HddCheckConfig()


@pytest.fixture
def sample_outputs():
    return sample_host()


@pytest.fixture
def fake_runner(sample_outputs):
    return FakeRunner(sample_outputs)
