"""
Sandbox fixtures for integration tests

Runs against the PayMongo test mode with real keys. Set PAYMONGO_SECRET_KEY
(or SECRET_KEY) and optionally PAYMONGO_PUBLIC_KEY, in the environment or a
.env file. Tests are skipped when no secret key is available.
"""

import pytest

from paymongo_sdk import ClientConfig, PaymongoClient
from paymongo_sdk.exceptions import ConfigurationError


@pytest.fixture(scope="session")
def sandbox_config():
    try:
        config = ClientConfig.from_env(timeout_connect=5.0, timeout_read=15.0)
    except ConfigurationError:
        pytest.skip("PAYMONGO_SECRET_KEY environment variable not set")

    if not config.secret_key or not config.secret_key.startswith("sk_test_"):
        pytest.skip("Integration tests need a test-mode secret key (sk_test_...)")

    return config


@pytest.fixture(scope="session")
def sandbox_client(sandbox_config):
    with PaymongoClient(config=sandbox_config) as client:
        yield client
