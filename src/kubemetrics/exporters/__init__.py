"""Exporters package for metrics exposition."""

from .prometheus_exporter import UsageGauges

__all__ = ["UsageGauges"]
