# tests/conftest.py

import pytest


@pytest.fixture(autouse=True)
def isolate_kubeconfig(monkeypatch, tmp_path):
    """
    Autouse fixture pointing KUBECONFIG at an empty temporary location so
    no test can pick up the developer's real cluster credentials. Tests
    that need a specific value override it with monkeypatch.
    """
    monkeypatch.setenv("KUBECONFIG", str(tmp_path / "kubeconfig"))
    monkeypatch.delenv("KUBERNETES_SERVICE_HOST", raising=False)
    monkeypatch.delenv("KUBERNETES_SERVICE_PORT", raising=False)
