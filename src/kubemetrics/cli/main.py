# src/kubemetrics/cli/main.py
"""
This module is the main entry point for the kube-metrics-exporter CLI.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kube-metrics-exporter",
    help="Expose Kubernetes node and container usage from metrics-server as Prometheus metrics.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of kube-metrics-exporter.
    """
    if value:
        from .. import __version__

        typer.echo(f"kube-metrics-exporter version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of kube-metrics-exporter.
    """
    from .. import __version__

    typer.echo(f"kube-metrics-exporter version: {__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Address to listen on.")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port to listen on.", min=1, max=65535)] = None,
):
    """
    Serve /metrics, querying the cluster on every scrape.
    """
    from ..api.app import run

    logger.info("Listening on %s:%s", host or config.METRICS_HOST, port or config.port)
    run(host=host, port=port)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    kube-metrics-exporter CLI main entry point.
    """
    pass


if __name__ == "__main__":
    app()
