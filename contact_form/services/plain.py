"""Plain helpdesk client: customers and threads via the GraphQL Core API.

Usage:
    client = PlainClient.from_settings(get_settings(), get_shared_client())

    result = await client.upsert_customer(email="grace@x.com", full_name="Grace")
    if result.error:
        ...

Every call returns a ``PlainResult`` holding either ``data`` or ``error``.
Upstream failures (network, HTTP status, GraphQL errors, mutation errors)
are reported as a ``PlainError`` instead of being raised.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contact_form.config import Settings
from contact_form.models.components import ContentBlock, dump_components
from contact_form.services.http_client import plain_headers

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ERROR_SELECTION = """
    error {
      message
      type
      code
      fields { field message type }
    }
"""

UPSERT_CUSTOMER_MUTATION = (
    """
mutation upsertCustomer($input: UpsertCustomerInput!) {
  upsertCustomer(input: $input) {
    result
    customer { id fullName }
"""
    + _ERROR_SELECTION
    + """
  }
}
"""
)

CREATE_THREAD_MUTATION = (
    """
mutation createThread($input: CreateThreadInput!) {
  createThread(input: $input) {
    thread { id title priority }
"""
    + _ERROR_SELECTION
    + """
  }
}
"""
)


class PlainErrorField(BaseModel):
    field: str
    message: str
    type: str = ""


class PlainError(BaseModel):
    """Structured error from the Plain API or the transport beneath it."""

    message: str
    # forbidden, bad_request, internal_server_error, mutation_error,
    # network_error or unknown
    type: str = "unknown"
    code: str | None = None
    fields: list[PlainErrorField] = []
    status_code: int | None = None


class Customer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str | None = Field(default=None, alias="fullName")


class Thread(BaseModel):
    id: str
    title: str | None = None
    priority: int | None = None


@dataclass
class PlainResult(Generic[T]):
    data: T | None = None
    error: PlainError | None = None


def _status_error_type(status_code: int) -> str:
    if status_code in (401, 403):
        return "forbidden"
    if status_code == 400:
        return "bad_request"
    if status_code >= 500:
        return "internal_server_error"
    return "unknown"


def _unexpected_response(status_code: int) -> PlainError:
    return PlainError(
        message="Plain API returned an unexpected response", status_code=status_code
    )


class PlainClient:
    """Minimal async client for the Plain GraphQL API."""

    def __init__(self, api_key: str, api_url: str, http_client: httpx.AsyncClient):
        self._api_key = api_key
        self._api_url = api_url
        self._http = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient
    ) -> "PlainClient":
        """Build a client from settings.

        Raises:
            ConfigurationError: if no API key is configured.
        """
        return cls(
            api_key=settings.require_plain_api_key(),
            api_url=settings.plain_api_url,
            http_client=http_client,
        )

    async def _mutate(
        self, operation: str, query: str, variables: dict[str, Any]
    ) -> tuple[dict[str, Any] | None, PlainError | None]:
        """Run a mutation and return its payload, or the error describing why not."""
        try:
            resp = await self._http.post(
                self._api_url,
                headers=plain_headers(self._api_key),
                json={"query": query, "variables": variables},
            )
        except httpx.HTTPError as e:
            logger.exception("Plain API request failed (%s)", operation)
            return None, PlainError(
                message=str(e) or "Network error", type="network_error"
            )

        if not resp.is_success:
            logger.warning("Plain API %d for %s", resp.status_code, operation)
            return None, PlainError(
                message=f"Plain API returned HTTP {resp.status_code}",
                type=_status_error_type(resp.status_code),
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError:
            return None, PlainError(
                message="Plain API returned invalid JSON", status_code=resp.status_code
            )
        if not isinstance(body, dict):
            return None, _unexpected_response(resp.status_code)

        errors = body.get("errors") or []
        if errors:
            first = errors[0] if isinstance(errors, list) else None
            if not isinstance(first, dict):
                return None, _unexpected_response(resp.status_code)
            extensions = first.get("extensions")
            try:
                return None, PlainError(
                    message=first.get("message") or "Unknown GraphQL error",
                    type="bad_request",
                    code=extensions.get("code") if isinstance(extensions, dict) else None,
                    status_code=resp.status_code,
                )
            except ValidationError:
                return None, _unexpected_response(resp.status_code)

        data = body.get("data") or {}
        payload = data.get(operation) if isinstance(data, dict) else None
        if payload is None:
            return None, PlainError(
                message=f"Plain API returned no data for {operation}",
                status_code=resp.status_code,
            )
        if not isinstance(payload, dict):
            return None, _unexpected_response(resp.status_code)

        raw = payload.get("error")
        if raw:
            if not isinstance(raw, dict):
                return None, _unexpected_response(resp.status_code)
            try:
                return None, PlainError(
                    message=raw.get("message") or "Unknown Plain error",
                    type="mutation_error",
                    code=raw.get("code"),
                    fields=raw.get("fields") or [],
                    status_code=resp.status_code,
                )
            except ValidationError:
                return None, _unexpected_response(resp.status_code)

        return payload, None

    async def upsert_customer(self, email: str, full_name: str) -> PlainResult[Customer]:
        """Create the customer if missing; leave an existing one untouched.

        ``onUpdate`` is always empty so the form never overwrites the name of
        a customer Plain already knows.
        """
        variables = {
            "input": {
                "identifier": {"emailAddress": email},
                "onCreate": {
                    "fullName": full_name,
                    "email": {"email": email, "isVerified": True},
                },
                "onUpdate": {},
            }
        }
        payload, error = await self._mutate(
            "upsertCustomer", UPSERT_CUSTOMER_MUTATION, variables
        )
        if error:
            return PlainResult(error=error)
        return self._parse(payload, "customer", Customer)

    async def create_thread(
        self,
        customer_id: str,
        title: str,
        components: Sequence[ContentBlock],
        label_type_ids: Sequence[str],
        priority: int,
    ) -> PlainResult[Thread]:
        variables = {
            "input": {
                "customerIdentifier": {"customerId": customer_id},
                "title": title,
                "components": dump_components(components),
                "labelTypeIds": list(label_type_ids),
                "priority": priority,
            }
        }
        payload, error = await self._mutate(
            "createThread", CREATE_THREAD_MUTATION, variables
        )
        if error:
            return PlainResult(error=error)
        return self._parse(payload, "thread", Thread)

    @staticmethod
    def _parse(payload: dict[str, Any], key: str, model: type[T]) -> PlainResult[T]:
        try:
            return PlainResult(data=model.model_validate(payload.get(key)))
        except ValidationError:
            return PlainResult(
                error=PlainError(message=f"Plain API returned an invalid {key}")
            )
