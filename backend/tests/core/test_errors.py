"""Error hierarchy tests — codes, categories, HTTP status and REST envelope."""

from jutils.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    JUtilsError,
    RenderError,
)


def test_render_error_is_critical():
    err = RenderError("disk full")
    assert isinstance(err, JUtilsError)
    assert err.http_status == 500
    assert err.code == "RENDER_ERROR"
    assert err.category == ErrorCategory.RENDERING
    assert err.severity == ErrorSeverity.CRITICAL
    assert "disk full" in err.message


def test_to_response_envelope():
    err = RenderError("bad anchor", ErrorContext(operation="generate_avatar"))
    body = err.to_response()["error"]
    assert body["code"] == "RENDER_ERROR"
    assert body["category"] == "rendering"
    assert body["severity"] == "critical"
    assert body["context"] == {"operation": "generate_avatar", "field": None}
    assert "timestamp" in body
