# src/kubemetrics/core/k8s_client.py
"""
Cluster credential discovery and construction of the client used to read
the resource metrics API.
"""

import asyncio
import logging

from kubernetes_asyncio import client, config

from kubemetrics.core.config import config as app_config
from kubemetrics.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_CONFIG_LOCK = asyncio.Lock()
_CONFIG_LOADED = False


async def _load_incluster() -> None:
    config.load_incluster_config()


async def _load_kubeconfig() -> None:
    await config.load_kube_config(config_file=app_config.KUBECONFIG)


# Tried in order; the first loader that succeeds wins.
_LOADERS = (
    ("in-cluster service account", _load_incluster),
    ("kubeconfig", _load_kubeconfig),
)


async def ensure_k8s_config() -> bool:
    """
    Load cluster credentials once per process.

    Returns:
        bool: True if credentials are (or already were) loaded, False otherwise.
    """
    global _CONFIG_LOADED

    if _CONFIG_LOADED:
        return True

    async with _CONFIG_LOCK:
        if _CONFIG_LOADED:
            return True

        for source, loader in _LOADERS:
            try:
                await loader()
            except config.ConfigException as e:
                logger.debug("No %s credentials: %s", source, e)
                continue
            except Exception as e:
                logger.warning("Unexpected error loading %s credentials: %s", source, e)
                continue
            logger.info("Loaded Kubernetes credentials from %s.", source)
            _CONFIG_LOADED = True
            return True

    logger.warning("Failed to load any Kubernetes configuration.")
    return False


async def create_metrics_api() -> client.CustomObjectsApi:
    """
    Build a CustomObjectsApi on its own ApiClient for querying metrics.k8s.io.
    The caller owns the client and must close ``api.api_client``.

    Raises:
        ConfigurationError: If no credentials could be loaded.
    """
    if not await ensure_k8s_config():
        raise ConfigurationError("No Kubernetes configuration available (in-cluster or kubeconfig).")
    return client.CustomObjectsApi(client.ApiClient())
