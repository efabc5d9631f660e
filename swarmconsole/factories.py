import importlib
from functools import lru_cache
from typing import Any

from swarmconsole.handlers.dispatcher import Dispatcher
from swarmconsole.services.cluster_api import ClusterApi, StatsSource
from swarmconsole.services.registry_probes import ProbingClusterApi
from swarmconsole.settings import settings


def load_factory(path: str, setting_name: str) -> Any:
    """Resolve a ``module:callable`` path and call it.

    Raises:
        RuntimeError: the setting is empty or does not point at a callable
    """
    if not path:
        raise RuntimeError(f"{setting_name} is not configured")

    module_name, _, attribute = path.partition(":")
    if not attribute:
        raise RuntimeError(f"{setting_name} must look like 'module:callable', got '{path}'")

    factory = getattr(importlib.import_module(module_name), attribute, None)
    if not callable(factory):
        raise RuntimeError(f"{setting_name} points at '{path}', which is not callable")
    return factory()


@lru_cache
def cluster_api_factory() -> ClusterApi:
    """Configured cluster API with the console's own registry probes in front."""
    return ProbingClusterApi(load_factory(settings.CLUSTER_API_FACTORY, "CLUSTER_API_FACTORY"))


@lru_cache
def stats_factory() -> StatsSource:
    return load_factory(settings.STATS_FACTORY, "STATS_FACTORY")


@lru_cache
def dispatcher_factory() -> Dispatcher:
    """Dispatcher bound to the configured collaborators.

    Cached as a singleton per worker process.
    """
    return Dispatcher(api=cluster_api_factory(), stats=stats_factory())
