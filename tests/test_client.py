"""
Unit tests for PaymongoClient and the blocking transport
"""

import base64
import os
from unittest.mock import MagicMock

import pytest
import requests
from prometheus_client import REGISTRY
from pydantic import ValidationError
from requests_mock import Mocker

import paymongo_sdk
from paymongo_sdk import Checkout, ClientConfig, PaymongoClient, Source
from paymongo_sdk.exceptions import (
    APIError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
    TimeoutError as PaymongoTimeoutError,
)


ENV_KEYS = ("PAYMONGO_SECRET_KEY", "PAYMONGO_PUBLIC_KEY", "SECRET_KEY", "PUBLIC_KEY")


def expected_auth(key):
    return "Basic " + base64.b64encode(f"{key}:".encode()).decode()


def test_client_initialization():
    client = PaymongoClient(secret_key="sk_test_123")

    assert client.config.secret_key == "sk_test_123"
    assert client.http.base_url == "https://api.paymongo.com/v1"
    for name in (
        "checkouts",
        "payments",
        "links",
        "sources",
        "customers",
        "payment_methods",
        "refunds",
    ):
        assert getattr(client, name).http is client.http


def test_client_requires_a_key():
    with pytest.raises(ConfigurationError):
        PaymongoClient()


def test_client_rejects_config_and_keys():
    config = ClientConfig(secret_key="sk_test_123")
    with pytest.raises(ValueError):
        PaymongoClient(secret_key="sk_test_123", config=config)


def test_client_initialization_invalid_config():
    with pytest.raises(ConfigurationError):
        PaymongoClient(config=ClientConfig(secret_key="sk_test_123", base_url=""))


def test_config_key_prefixes():
    with pytest.raises(ValidationError, match="Secret key must start with 'sk_'"):
        ClientConfig(secret_key="pk_test_123")

    with pytest.raises(ValidationError, match="Public key must start with 'pk_'"):
        ClientConfig(public_key="sk_test_123")


def test_config_repr_hides_keys():
    config = ClientConfig(secret_key="sk_test_supersecret", public_key="pk_test_public")

    assert "supersecret" not in repr(config)
    assert "pk_test_public" not in str(config)


def test_config_from_env(monkeypatch, tmp_path):
    environ = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
    environ["PAYMONGO_BASE_URL"] = "https://sandbox.example.test/v1"
    monkeypatch.setattr(os, "environ", environ)

    env_file = tmp_path / ".env"
    env_file.write_text("SECRET_KEY=sk_test_from_file\nPUBLIC_KEY=pk_test_from_file\n")

    config = ClientConfig.from_env(str(env_file))

    assert config.secret_key == "sk_test_from_file"
    assert config.public_key == "pk_test_from_file"
    assert config.base_url == "https://sandbox.example.test/v1"


def test_config_from_env_prefers_prefixed_names(monkeypatch, tmp_path):
    monkeypatch.setenv("PAYMONGO_SECRET_KEY", "sk_test_prefixed")
    monkeypatch.setenv("SECRET_KEY", "sk_test_bare")

    config = ClientConfig.from_env(str(tmp_path / "missing.env"))

    assert config.secret_key == "sk_test_prefixed"


def test_config_from_env_without_keys(monkeypatch, tmp_path):
    for name in ENV_KEYS:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ConfigurationError):
        ClientConfig.from_env(str(tmp_path / "missing.env"))


def test_secret_key_basic_auth(client, base_url, checkout_resource):
    with Mocker() as m:
        m.get(f"{base_url}/checkout_sessions/cs_123", json={"data": checkout_resource()})

        client.checkouts.retrieve_checkout("cs_123")

        headers = m.last_request.headers
        assert headers["Authorization"] == expected_auth("sk_test_123")
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"].startswith("paymongo-python-sdk/")


def test_public_key_falls_back_to_secret_key(base_url, source_resource):
    client = PaymongoClient(secret_key="sk_test_only")

    with Mocker() as m:
        m.post(f"{base_url}/sources", json={"data": source_resource()})

        client.sources.create_source(Source(amount=10000, currency="PHP", type="gcash"))

        assert m.last_request.headers["Authorization"] == expected_auth("sk_test_only")


def test_secret_key_required_for_secret_operations(base_url):
    client = PaymongoClient(public_key="pk_test_only")

    with pytest.raises(ConfigurationError):
        client.checkouts.retrieve_checkout("cs_123")


def test_api_error_carries_provider_errors(client, base_url):
    with Mocker() as m:
        m.post(
            f"{base_url}/checkout_sessions",
            json={
                "errors": [
                    {
                        "code": "parameter_required",
                        "detail": "line_items is required.",
                        "source": {"pointer": "line_items", "attribute": "line_items"},
                    },
                    {
                        "code": "parameter_required",
                        "detail": "payment_method_types is required.",
                        "source": {
                            "pointer": "payment_method_types",
                            "attribute": "payment_method_types",
                        },
                    },
                ]
            },
            status_code=400,
        )

        with pytest.raises(APIError) as exc_info:
            client.checkouts.create_checkout(Checkout(description="missing items"))

    error = exc_info.value
    assert error.status_code == 400
    assert error.code == "parameter_required"
    assert error.message == "line_items is required."
    assert len(error.errors) == 2
    assert error.errors[1].attribute == "payment_method_types"
    assert str(error) == "[400] parameter_required: line_items is required."


def test_api_error_with_non_json_body(client, base_url):
    with Mocker() as m:
        m.get(f"{base_url}/payments/pay_123", text="Bad Gateway", status_code=502)

        with pytest.raises(APIError) as exc_info:
            client.payments.retrieve_payment("pay_123")

    assert exc_info.value.status_code == 502
    assert exc_info.value.code is None
    assert exc_info.value.message == "Bad Gateway"


def test_unauthorized(client, base_url):
    with Mocker() as m:
        m.get(
            f"{base_url}/links/link_123",
            json={"errors": [{"code": "api_key_invalid", "detail": "API key is invalid."}]},
            status_code=401,
        )

        with pytest.raises(APIError) as exc_info:
            client.links.retrieve_link("link_123")

    assert exc_info.value.status_code == 401
    assert exc_info.value.code == "api_key_invalid"


def test_malformed_success_body(client, base_url):
    with Mocker() as m:
        m.get(f"{base_url}/sources/src_123", text="<html>oops</html>")

        with pytest.raises(ResponseFormatError):
            client.sources.retrieve_source("src_123")


def test_success_body_without_data_envelope(client, base_url):
    with Mocker() as m:
        m.get(f"{base_url}/sources/src_123", json={"id": "src_123"})

        with pytest.raises(ResponseFormatError):
            client.sources.retrieve_source("src_123")


def test_success_body_with_wrong_shape(client, base_url, source_resource):
    resource = source_resource()
    resource["attributes"]["amount"] = "not-a-number"

    with Mocker() as m:
        m.get(f"{base_url}/sources/src_123", json={"data": resource})

        with pytest.raises(ResponseFormatError):
            client.sources.retrieve_source("src_123")


def test_network_error(client, base_url):
    with Mocker() as m:
        m.get(f"{base_url}/refunds/ref_123", exc=requests.exceptions.ConnectionError)

        with pytest.raises(NetworkError):
            client.refunds.retrieve_refund("ref_123")


def test_timeout(client, base_url):
    with Mocker() as m:
        m.get(f"{base_url}/refunds/ref_123", exc=requests.exceptions.ReadTimeout)

        with pytest.raises(PaymongoTimeoutError):
            client.refunds.retrieve_refund("ref_123")


def test_request_metrics_recorded(client, base_url, checkout_resource):
    labels = {"endpoint": "retrieve_checkout", "code": "200"}
    before = REGISTRY.get_sample_value("paymongo_sdk_requests_total", labels) or 0.0

    with Mocker() as m:
        m.get(f"{base_url}/checkout_sessions/cs_123", json={"data": checkout_resource()})
        client.checkouts.retrieve_checkout("cs_123")

    after = REGISTRY.get_sample_value("paymongo_sdk_requests_total", labels)
    assert after == before + 1


def test_context_manager_closes_owned_session(test_config):
    with PaymongoClient(config=test_config) as client:
        client.http.session.close = MagicMock()

    client.http.session.close.assert_called_once()


def test_external_session_left_open(test_config):
    session = requests.Session()
    session.close = MagicMock()

    with PaymongoClient(config=test_config, session=session):
        pass

    session.close.assert_not_called()


def test_api_error_metrics_recorded(client, base_url):
    labels = {"endpoint": "retrieve_link", "error_code": "resource_not_found"}
    before = REGISTRY.get_sample_value("paymongo_sdk_api_errors_total", labels) or 0.0

    with Mocker() as m:
        m.get(
            f"{base_url}/links/link_missing",
            json={"errors": [{"code": "resource_not_found", "detail": "No such link."}]},
            status_code=404,
        )
        with pytest.raises(APIError):
            client.links.retrieve_link("link_missing")

    after = REGISTRY.get_sample_value("paymongo_sdk_api_errors_total", labels)
    assert after == before + 1


def test_owned_session_follows_verify_ssl():
    config = ClientConfig(secret_key="sk_test_123", verify_ssl=False)

    with PaymongoClient(config=config) as client:
        assert client.http.session.verify is False


def test_external_session_keeps_its_tls_settings():
    session = requests.Session()
    session.verify = "/etc/ssl/certs/corporate-ca.pem"
    config = ClientConfig(secret_key="sk_test_123", verify_ssl=False)

    PaymongoClient(config=config, session=session)

    assert session.verify == "/etc/ssl/certs/corporate-ca.pem"


def test_timeout_error_exported_from_package():
    assert paymongo_sdk.PaymongoTimeoutError is PaymongoTimeoutError
    assert "PaymongoTimeoutError" in paymongo_sdk.__all__
