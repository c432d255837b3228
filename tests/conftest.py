import pytest
import graphdump as gd


@pytest.fixture(autouse=True)
def _reset_config():
    gd.reset_defaults()
    yield
    gd.reset_defaults()
