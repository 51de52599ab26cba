import pytest
from loguru import logger

from dispatch_hooks import HookRegistry, default_registry


def pytest_configure(config):
    # Register markers used across the suite
    config.addinivalue_line("markers", "asyncio: mark test as async")


@pytest.fixture
def registry():
    return HookRegistry()


@pytest.fixture(autouse=True)
def clean_default_registry():
    default_registry.clear_hooks()
    yield
    default_registry.clear_hooks()
    # configure_logging re-enables the package; restore the import-time state
    logger.disable("dispatch_hooks")


@pytest.fixture
def calls():
    """Shared log that hooks and continuations append to."""

    return []


@pytest.fixture
def log_records():
    """Collect every Loguru record at DEBUG and above."""

    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    try:
        logger.remove(handler_id)
    except ValueError:
        # configure_logging already removed every sink
        pass
