from unittest.mock import MagicMock, patch

import pytest

from swarmconsole.factories import cluster_api_factory, load_factory
from swarmconsole.services.registry_probes import ProbingClusterApi
from swarmconsole.settings import settings


@pytest.fixture(autouse=True)
def clear_cluster_api_cache():
    cluster_api_factory.cache_clear()
    yield
    cluster_api_factory.cache_clear()


def test_cluster_api_gets_console_probes():
    with patch.object(settings, "CLUSTER_API_FACTORY", "unittest.mock:MagicMock"):
        api = cluster_api_factory()

    assert isinstance(api, ProbingClusterApi)
    assert isinstance(api.delegate, MagicMock)


@pytest.mark.parametrize(
    "path, message",
    [
        ("", "is not configured"),
        ("unittest.mock", "must look like 'module:callable'"),
        ("unittest.mock:sentinel", "is not callable"),
    ],
)
def test_load_factory_rejects_bad_paths(path, message):
    with pytest.raises(RuntimeError, match=message):
        load_factory(path, "CLUSTER_API_FACTORY")
