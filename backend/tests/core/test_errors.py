"""Error hierarchy tests: codes, categories, and the REST envelope."""

from catalog.core.errors import (
    CatalogAPIError, CatalogError, ErrorCategory, ErrorContext, ErrorSeverity,
    MalformedPayloadError,
)


def test_catalog_api_error_is_external_and_critical():
    err = CatalogAPIError("boom", "connection_error")
    assert isinstance(err, CatalogError)
    assert err.code == "CATALOG_API_ERROR"
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.http_status == 503
    assert "connection_error" in err.message


def test_timeout_maps_to_timeout_category():
    assert CatalogAPIError("slow", "timeout").category is ErrorCategory.TIMEOUT


def test_malformed_payload_is_a_fetch_failure():
    err = MalformedPayloadError("not a list")
    assert isinstance(err, CatalogAPIError)
    assert err.code == "MALFORMED_PAYLOAD"
    assert err.api_error_type == "malformed_payload"


def test_to_response_envelope_carries_context():
    ctx = ErrorContext(listing="schools", endpoint="/schools")
    body = CatalogAPIError("down", "http_status", context=ctx).to_response()
    assert body["error"]["code"] == "CATALOG_API_ERROR"
    assert body["error"]["category"] == "external_api"
    assert body["error"]["severity"] == "critical"
    assert body["error"]["context"] == {"listing": "schools", "endpoint": "/schools"}
    assert "timestamp" in body["error"]
