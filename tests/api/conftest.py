# tests/api/conftest.py
"""
Shared fixtures for API tests.
Each test gets its own app, gauge registry and mocked metrics source.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from prometheus_client.parser import text_string_to_metric_families

from kubemetrics.api.app import create_app
from kubemetrics.collectors.base_collector import BaseMetricsSource
from kubemetrics.exporters.prometheus_exporter import UsageGauges
from kubemetrics.models.usage import ContainerUsageSample, NodeUsageSample


@pytest.fixture
def mock_source():
    """Returns a mock metrics source with an empty cluster."""
    source = AsyncMock(spec=BaseMetricsSource)
    source.list_node_usage = AsyncMock(return_value=[])
    source.list_pod_usage = AsyncMock(return_value=[])
    return source


@pytest.fixture
def gauges():
    """Returns gauges backed by a fresh registry."""
    return UsageGauges()


@pytest.fixture
def client(mock_source, gauges):
    """Creates a TestClient for an app wired to the mock source and isolated gauges."""
    app = create_app(source=mock_source, gauges=gauges)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_nodes():
    return [
        NodeUsageSample(node_name="worker-1", cpu_cores=2.5, memory_bytes=4e9),
    ]


@pytest.fixture
def sample_containers():
    return [
        ContainerUsageSample(
            namespace="default",
            pod_name="app-1",
            container_name="main",
            cpu_cores=0.1,
            memory_bytes=1e8,
        ),
    ]


@pytest.fixture
def parse_exposition():
    """Returns a parser mapping (series name, sorted label items) to value for every sample."""

    def _parse(text):
        values = {}
        for family in text_string_to_metric_families(text):
            for sample in family.samples:
                values[(sample.name, tuple(sorted(sample.labels.items())))] = sample.value
        return values

    return _parse
