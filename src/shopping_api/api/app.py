import logging
from typing import Annotated, Any

from fastapi import FastAPI, Header, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shopping_api.api.cors import TrustedOriginCORSMiddleware
from shopping_api.api.dependencies import (
    AdminSessionDep,
    AuthHandlerDep,
    ListHandlerDep,
    SessionDep,
    lifespan,
)
from shopping_api.config import settings
from shopping_api.dto import (
    CreateListRequest,
    HealthCheckResponse,
    LoginRequest,
    PatchListRequest,
    PushItemRequest,
    ReplaceListRequest,
    ShoppingListResponse,
    TokenResponse,
)

logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Shopping List API",
    description="Shopping list API with CRUD operations",
    version="0.1.0",
    lifespan=lifespan,
    openapi_url="/v1/openapi.json" if settings.is_development else None,
    docs_url="/v1/docs" if settings.is_development else None,
    redoc_url=None,
)

app.add_middleware(
    TrustedOriginCORSMiddleware,  # type: ignore[arg-type]
    trusted_origins=settings.cors_trusted_origins,
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or invalid request bodies as 400 Bad Request."""
    logger.debug("Invalid request to %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "invalid data"},
    )


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Shopping List API",
        "version": "0.1.0",
        "description": "Shopping list API with CRUD operations",
        "endpoints": {
            "lists": "/v1/lists",
            "login": "/v1/login",
            "logout": "/v1/logout",
            "health": "/health",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
def health(handler: ListHandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return handler.health_check()


@app.post("/v1/login", response_model=TokenResponse)
def login(request: LoginRequest, handler: AuthHandlerDep) -> TokenResponse:
    """Exchange username and password for a bearer token."""
    return handler.login(request)


@app.post("/v1/logout", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def logout(session: SessionDep, handler: AuthHandlerDep) -> Response:
    """Revoke the presented bearer token."""
    return handler.logout(session)


@app.post(
    "/v1/lists",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_list(
    request: CreateListRequest,
    handler: ListHandlerDep,
    _session: AdminSessionDep,
) -> ShoppingListResponse:
    """Create a shopping list (admin only)."""
    return handler.create_list(request)


@app.get("/v1/lists", response_model=list[ShoppingListResponse])
def get_lists(handler: ListHandlerDep, _session: SessionDep) -> list[ShoppingListResponse]:
    """Get all shopping lists."""
    return handler.get_lists()


@app.get(
    "/v1/lists/{list_id}",
    response_model=ShoppingListResponse,
    responses={304: {"description": "Not Modified"}},
)
def get_list(
    list_id: str,
    handler: ListHandlerDep,
    _session: SessionDep,
    if_none_match: Annotated[str | None, Header()] = None,
) -> Response:
    """Get one shopping list, with ETag-based conditional GET."""
    return handler.get_list(list_id, if_none_match)


@app.put("/v1/lists/{list_id}", response_model=ShoppingListResponse)
def replace_list(
    list_id: str,
    request: ReplaceListRequest,
    handler: ListHandlerDep,
    _session: AdminSessionDep,
) -> ShoppingListResponse:
    """Replace a shopping list's name and items (admin only)."""
    return handler.replace_list(list_id, request)


@app.patch("/v1/lists/{list_id}", response_model=ShoppingListResponse)
def patch_list(
    list_id: str,
    request: PatchListRequest,
    handler: ListHandlerDep,
    _session: AdminSessionDep,
) -> ShoppingListResponse:
    """Partially update a shopping list (admin only)."""
    return handler.patch_list(list_id, request)


@app.delete(
    "/v1/lists/{list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_list(list_id: str, handler: ListHandlerDep, _session: AdminSessionDep) -> Response:
    """Delete a shopping list (admin only)."""
    return handler.delete_list(list_id)


@app.post("/v1/lists/{list_id}/push", response_model=ShoppingListResponse)
def push_item(
    list_id: str,
    request: PushItemRequest,
    handler: ListHandlerDep,
    _session: AdminSessionDep,
) -> ShoppingListResponse:
    """Append one item to a shopping list (admin only)."""
    return handler.push_item(list_id, request)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shopping_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
