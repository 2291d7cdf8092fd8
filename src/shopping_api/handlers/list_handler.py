"""HTTP handlers for shopping list operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, conditional GET and error
responses.
"""

import hashlib
import logging

from fastapi import HTTPException, Response, status

from shopping_api.config import settings
from shopping_api.dto import (
    CreateListRequest,
    HealthCheckResponse,
    PatchListRequest,
    PushItemRequest,
    ReplaceListRequest,
    ShoppingListResponse,
)
from shopping_api.exceptions import (
    InvalidListIdError,
    ListNotFoundError,
    ShoppingApiError,
    StoreError,
)
from shopping_api.services import ListService

logger = logging.getLogger(__name__)


def compute_etag(body: bytes) -> str:
    """Strong entity tag: quoted hex SHA-256 of the response body."""
    return f'"{hashlib.sha256(body).hexdigest()}"'


def etag_matches(if_none_match: str | None, etag: str) -> bool:
    """Check an If-None-Match header value against an entity tag.

    Accepts comma-separated tag lists, `*`, and weak (`W/`) tags.
    """
    if not if_none_match:
        return False
    for candidate in if_none_match.split(","):
        candidate = candidate.strip()
        if candidate == "*":
            return True
        if candidate.startswith("W/"):
            candidate = candidate[2:]
        if candidate == etag:
            return True
    return False


def to_http_error(error: ShoppingApiError) -> HTTPException:
    """Map a domain exception to an HTTPException.

    Store failures get a generic message; details stay in the logs.
    """
    if isinstance(error, InvalidListIdError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="invalid id")
    if isinstance(error, ListNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="list not found")
    if not isinstance(error, StoreError):
        logger.error("Unexpected domain error: %r", error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="internal server error",
    )


class ListHandler:
    """HTTP handlers for shopping list operations.

    This handler delegates business logic to ListService and handles
    HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - ETag / If-None-Match handling for single-list reads
    - Error handling and responses

    Example:
        ```python
        handler = ListHandler(list_service=ListService.create(store=store))

        @app.get("/v1/lists/{list_id}")
        def get_list(list_id: str, if_none_match: str | None = Header(None)):
            return handler.get_list(list_id, if_none_match)
        ```
    """

    def __init__(self, list_service: ListService) -> None:
        """Initialize the list handler.

        Args:
            list_service: The list service for business logic (required).
        """
        self._lists = list_service

    def get_lists(self) -> list[ShoppingListResponse]:
        """Handle GET /v1/lists requests."""
        try:
            lists = self._lists.get_lists()
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return [ShoppingListResponse.from_entity(entry) for entry in lists]

    def get_list(self, raw_id: str, if_none_match: str | None = None) -> Response:
        """Handle GET /v1/lists/{id} requests.

        The response carries `Cache-Control: no-cache` so clients always
        revalidate, and a SHA-256 ETag so revalidation can end in a
        bodiless 304.

        Args:
            raw_id: List id from the path
            if_none_match: Value of the If-None-Match request header

        Returns:
            200 with the list, or 304 Not Modified

        Raises:
            HTTPException: 404 for invalid/unknown ids, 500 on store failure
        """
        try:
            entry = self._lists.get_list(raw_id)
        except ShoppingApiError as e:
            raise to_http_error(e) from e

        body = ShoppingListResponse.from_entity(entry).model_dump_json().encode()
        etag = compute_etag(body)
        headers = {"ETag": etag, "Cache-Control": "no-cache"}

        if etag_matches(if_none_match, etag):
            return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers=headers)

        return Response(content=body, media_type="application/json", headers=headers)

    def create_list(self, request: CreateListRequest) -> ShoppingListResponse:
        """Handle POST /v1/lists requests."""
        try:
            created = self._lists.create_list(request.name, request.items)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return ShoppingListResponse.from_entity(created)

    def replace_list(self, raw_id: str, request: ReplaceListRequest) -> ShoppingListResponse:
        """Handle PUT /v1/lists/{id} requests."""
        try:
            updated = self._lists.replace_list(raw_id, request.name, request.items)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return ShoppingListResponse.from_entity(updated)

    def patch_list(self, raw_id: str, request: PatchListRequest) -> ShoppingListResponse:
        """Handle PATCH /v1/lists/{id} requests."""
        try:
            updated = self._lists.patch_list(raw_id, name=request.name, items=request.items)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return ShoppingListResponse.from_entity(updated)

    def push_item(self, raw_id: str, request: PushItemRequest) -> ShoppingListResponse:
        """Handle POST /v1/lists/{id}/push requests."""
        try:
            updated = self._lists.push_item(raw_id, request.item)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return ShoppingListResponse.from_entity(updated)

    def delete_list(self, raw_id: str) -> Response:
        """Handle DELETE /v1/lists/{id} requests."""
        try:
            self._lists.delete_list(raw_id)
        except ShoppingApiError as e:
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the store is unreachable
        """
        is_healthy = self._lists.is_healthy()
        if not is_healthy:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="list store unavailable",
            )
        return HealthCheckResponse(
            status="healthy",
            store_healthy=is_healthy,
            store_backend=settings.store_backend,
        )
