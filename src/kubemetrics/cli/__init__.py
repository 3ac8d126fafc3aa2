# src/kubemetrics/cli/__init__.py
"""
kube-metrics-exporter CLI Package

Exposes the top-level Typer `app` for the console entrypoint.
"""

from .main import app

__all__ = ["app"]
