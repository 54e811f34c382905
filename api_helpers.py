import json
import logging
from typing import Any, Optional

import allure
import httpx

from config import ApiConfig
from models import to_payload

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _log_request(request: httpx.Request):
    logger.debug(f"--> {request.method} {request.url} headers={dict(request.headers)}")


def _log_response(response: httpx.Response):
    # Event hooks see the response before the body has been read.
    response.read()
    request = response.request
    logger.debug(
        f"<-- {response.status_code} {request.method} {request.url} "
        f"content-type={response.headers.get('Content-Type')} body={response.text[:2000]}"
    )


def build_client(config: ApiConfig, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Reusable request template: base URL, JSON headers, transport timeouts and
    request/response logging. No retries.
    """
    timeout = httpx.Timeout(
        config.request_timeout_ms / 1000,
        connect=config.connection_timeout_ms / 1000,
    )
    return httpx.Client(
        base_url=config.base_url,
        headers=JSON_HEADERS,
        timeout=timeout,
        event_hooks={"request": [_log_request], "response": [_log_response]},
        transport=transport,
    )


def elapsed_ms(response: httpx.Response) -> float:
    return response.elapsed.total_seconds() * 1000


def _attachment_type(response: httpx.Response):
    if "json" in response.headers.get("Content-Type", "").lower():
        return allure.attachment_type.JSON
    return allure.attachment_type.TEXT


def make_request(client: httpx.Client, method: str, path: str, body: Any = None) -> httpx.Response:
    """
    Sends one request and returns the response untouched, whatever its status.

    The call runs inside an Allure step so the trace records it even when the
    transport raises. Transport errors are logged and re-raised.
    """
    method = method.upper()
    payload = to_payload(body)

    with allure.step(f"{method} {path}"):
        if payload is not None:
            logger.info(f"Sending {method} request to: {path} with body: {payload}")
            allure.attach(
                json.dumps(payload, indent=2),
                name="Request body",
                attachment_type=allure.attachment_type.JSON,
            )
        else:
            logger.info(f"Sending {method} request to: {path}")

        try:
            response = client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise

        logger.info(f"{method} {path} -> {response.status_code} in {elapsed_ms(response):.0f} ms")
        allure.attach(
            response.text,
            name=f"Response {response.status_code}",
            attachment_type=_attachment_type(response),
        )
        return response


class BaseApiClient:
    """Generic REST operations over a single httpx.Client."""

    def __init__(self, config: ApiConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self.client = build_client(config, transport=transport)
        logger.info(f"Request specification initialized with base URL: {config.base_url}")

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def get_all(self, endpoint: str) -> httpx.Response:
        return make_request(self.client, "GET", endpoint)

    def get_by_id(self, endpoint: str, resource_id) -> httpx.Response:
        return make_request(self.client, "GET", f"{endpoint}/{resource_id}")

    def create(self, endpoint: str, body) -> httpx.Response:
        return make_request(self.client, "POST", endpoint, body)

    def update(self, endpoint: str, resource_id, body) -> httpx.Response:
        return make_request(self.client, "PUT", f"{endpoint}/{resource_id}", body)

    def delete_by_id(self, endpoint: str, resource_id) -> httpx.Response:
        return make_request(self.client, "DELETE", f"{endpoint}/{resource_id}")

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
