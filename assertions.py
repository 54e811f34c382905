from typing import Any, Dict, Iterable

import httpx
import jsonschema
import pytest
from hamcrest import assert_that, equal_to, is_in, less_than
from jsonschema.exceptions import ValidationError

from api_helpers import elapsed_ms

EXPECTED_CONTENT_TYPE = "application/json; charset=utf-8; v=1.0"
RESPONSE_TIME_CEILING_MS = 5000


def _describe(response: httpx.Response) -> str:
    return f"{response.request.method} {response.request.url} -> {response.status_code}. Body: {response.text[:1000]}"


def assert_status(response: httpx.Response, *allowed: int):
    """Status must equal the one expected code, or be one of several."""
    if len(allowed) == 1:
        assert_that(response.status_code, equal_to(allowed[0]),
                    f"Expected {allowed[0]}, got {_describe(response)}")
    else:
        assert_that(response.status_code, is_in(allowed),
                    f"Expected one of {list(allowed)}, got {_describe(response)}")


def assert_json_content_type(response: httpx.Response, expected: str = EXPECTED_CONTENT_TYPE):
    content_type = response.headers.get("Content-Type", "")
    assert_that(content_type, equal_to(expected),
                f"Unexpected Content-Type for {response.request.method} {response.request.url}")


def assert_response_time(response: httpx.Response, ceiling_ms: float = RESPONSE_TIME_CEILING_MS):
    took = elapsed_ms(response)
    assert_that(took, less_than(ceiling_ms),
                f"{response.request.method} {response.request.url} took {took:.0f} ms")


def assert_matches_schema(instance: Any, schema: Dict[str, Any], label: str):
    try:
        jsonschema.validate(instance=instance, schema=schema)
    except ValidationError as e:
        pytest.fail(
            f"Response JSON does not match '{label}' schema:\n"
            f"Validation message: {e.message}\n"
            f"Validator: {e.validator}\n"
            f"Validator path: {list(e.schema_path)}\n"
            f"Instance path: {list(e.path)}\n"
            f"Offending instance: {e.instance}\n"
            f"Full response: {instance}"
        )


def assert_echoes(actual: Dict[str, Any], expected, fields: Iterable[str]):
    """Each wire field in `fields` must come back exactly as it was sent."""
    sent = expected.to_payload()
    for field in fields:
        assert_that(actual.get(field), equal_to(sent.get(field)),
                    f"Field '{field}' was not echoed back. Sent: {sent}. Got: {actual}")
