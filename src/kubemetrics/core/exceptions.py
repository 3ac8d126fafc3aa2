class KubeMetricsError(Exception):
    """Base exception for kube-metrics-exporter."""

    pass


class ConfigurationError(KubeMetricsError):
    """Raised when no Kubernetes configuration could be loaded."""

    pass
