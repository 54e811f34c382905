import logging

import pytest

from clients import AuthorsApiClient, BooksApiClient
from config import get_config
from listener import ExecutionListener
from logging_helper import configure_logging

logger = logging.getLogger(__name__)

OPTION_KEYS = {
    "--api-base-url": "base.url",
    "--api-version": "api.version",
    "--api-log-level": "log.level",
}


def pytest_addoption(parser):
    group = parser.getgroup("bookstore", "Bookstore API conformance suite")
    group.addoption("--offline", action="store_true", default=False,
                    help="skip the scenarios that call the external Books/Authors API")
    group.addoption("--api-base-url", default=None,
                    help="override base.url (BASE_URL)")
    group.addoption("--api-version", default=None,
                    help="override api.version (API_VERSION)")
    group.addoption("--api-log-level", default=None,
                    help="override log.level (LOG_LEVEL) for the execution log")


def cli_overrides(config):
    return {key: config.getoption(option) for option, key in OPTION_KEYS.items()}


def live_skip_marker(config):
    """Skip marker for live scenarios, or None when they should run."""
    if not config.getoption("--offline"):
        return None
    return pytest.mark.skip(reason="--offline: external API scenarios not run")


def pytest_configure(config):
    api_config = get_config(overrides=cli_overrides(config))
    configure_logging(api_config.log_level)
    config.pluginmanager.register(
        ExecutionListener(base_url=api_config.base_url), "bookstore-execution-listener"
    )


def pytest_collection_modifyitems(config, items):
    skip_live = live_skip_marker(config)
    if skip_live is None:
        return
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def api_config():
    return get_config()


@pytest.fixture(scope="session")
def books_client(api_config):
    client = BooksApiClient(api_config)
    logger.info(f"Books API Client initialized with base URL: {client.base_url}")
    yield client
    client.close()


@pytest.fixture(scope="session")
def authors_client(api_config):
    client = AuthorsApiClient(api_config)
    logger.info(f"Authors API Client initialized with base URL: {client.base_url}")
    yield client
    client.close()
