"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from query_portal.api.admin import router as admin_router
from query_portal.api.models import CustomerLoginRequest, LoginRequest, SignupRequest
from query_portal.app_logging import configure_logging
from query_portal.containers import AppContainer
from query_portal.domain.errors import ErrorKind, PortalError

_STATUS_BY_KIND = {
    ErrorKind.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_EMAIL_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PASSWORD_TOO_SHORT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}

_INTERNAL_ERROR = "Internal server error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Query Portal")
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(
        _request: Request, _exc: RequestValidationError
    ) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    def _failure(exc: PortalError, server_message: str) -> JSONResponse:
        status_code = _STATUS_BY_KIND.get(exc.kind)
        if status_code is None:
            logger.error("Request failed: %s", exc.message, exc_info=exc)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, server_message)
        return _error(status_code, exc.message)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/auth")
    def login(body: LoginRequest, request: Request) -> JSONResponse:
        """Authenticate a directory user by email and password."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.user_directory.authenticate(
                body.email, body.password
            )
        except PortalError as exc:
            return _failure(exc, _INTERNAL_ERROR)
        except Exception:
            logger.exception("Authentication error")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)
        return JSONResponse({"success": True, "user": {"email": profile.email}})

    @app.post("/auth/signup")
    def signup(body: SignupRequest, request: Request) -> JSONResponse:
        """Register a new directory user."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.user_directory.register(
                body.name, body.email, body.password
            )
        except PortalError as exc:
            return _failure(exc, "Failed to create user")
        except Exception:
            logger.exception("Registration error")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)
        return JSONResponse({"success": True, "user": profile.to_dict()})

    @app.post("/auth/customer")
    def customer_login(
        body: CustomerLoginRequest, request: Request
    ) -> JSONResponse:
        """Authenticate a company customer by email and access code."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.customer_access.authenticate(
                body.email, body.access_code
            )
        except PortalError as exc:
            return _failure(exc, _INTERNAL_ERROR)
        except Exception:
            logger.exception("Customer authentication error")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)
        return JSONResponse({"success": True, "user": profile.to_dict()})

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
