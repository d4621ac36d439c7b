import logging
from collections.abc import Iterable

import pytest


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Iterable[None]:
    """Configure logging for ALL tests before anything else"""
    from loginflow.infrastructure.config.loggers import configure_loggers

    # Propagate to root so that caplog still captures our records.
    configure_loggers(level="DEBUG", handlers=["null"], propagate=True)

    yield

    logging.shutdown()
