# src/kubemetrics/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- HTTP listener ---
    METRICS_HOST = os.getenv("METRICS_HOST", "0.0.0.0")
    METRICS_PORT = os.getenv("METRICS_PORT", "8080")

    # --- Kubernetes metrics API ---
    METRICS_API_GROUP = os.getenv("METRICS_API_GROUP", "metrics.k8s.io")
    METRICS_API_VERSION = os.getenv("METRICS_API_VERSION", "v1beta1")

    # KUBECONFIG is resolved at access time so tests and the CLI can point
    # at a different file after import.
    @property
    def KUBECONFIG(self) -> str | None:
        return os.getenv("KUBECONFIG") or None

    @property
    def port(self) -> int:
        return int(self.METRICS_PORT)

    def validate_instance(self):
        try:
            port = int(self.METRICS_PORT)
        except (TypeError, ValueError):
            raise ValueError(f"METRICS_PORT must be an integer, got '{self.METRICS_PORT}'.")
        if not 0 < port < 65536:
            raise ValueError(f"METRICS_PORT must be between 1 and 65535, got {port}.")
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}.")
        if not self.METRICS_API_GROUP or not self.METRICS_API_VERSION:
            logging.getLogger(__name__).warning("Metrics API group or version is empty; scrapes will fail.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
