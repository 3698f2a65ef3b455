"""FastAPI application exposing route assessment and follow-up chat."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from route_sentinel.api.schemas import (
    GENERIC_ERROR,
    AssessRequest,
    ChatRequest,
    ChatResponse,
    ErrorResponse,
)
from route_sentinel.config import (
    RouteSentinelConfig,
    Services,
    create_http_client,
    create_services,
)
from route_sentinel.errors import InvalidRequestError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(
    config: RouteSentinelConfig | None = None,
    *,
    services: Services | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        config: Root configuration, used when *services* is not given.
        services: Pre-built services. When given, no outbound HTTP client is
            created at startup.
    """
    config = config or RouteSentinelConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if services is not None:
            app.state.services = services
            yield
            return

        http_client = create_http_client(config.http)
        app.state.services = create_services(config, http_client=http_client)
        logger.info("Route Sentinel started (model %s)", config.llm.model)
        try:
            yield
        finally:
            await http_client.aclose()
            logger.info("Route Sentinel stopped")

    app = FastAPI(
        title="Route Sentinel API",
        description="Shipping route risk assessment with live news and port imagery",
        version="0.1.0",
        lifespan=lifespan,
    )
    if services is not None:
        app.state.services = services

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s body: %s", request.url.path, exc.errors())
        return _error(400, "Invalid request body")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/assess")
    async def assess(request: Request, body: AssessRequest | None = None) -> JSONResponse:
        route = body.route if body else None
        if not route or not route.strip():
            return _error(400, "No route provided")

        svc: Services = request.app.state.services
        try:
            response = await svc.assessor.assess(route)
        except InvalidRequestError as e:
            return _error(400, str(e))
        except Exception:
            logger.exception("Assessment failed for %r", route)
            return _error(500, GENERIC_ERROR)
        return JSONResponse(content=response.to_dict())

    @app.post("/chat")
    async def chat(request: Request, body: ChatRequest | None = None) -> JSONResponse:
        body = body or ChatRequest()
        svc: Services = request.app.state.services
        try:
            reply = await svc.chat.reply(
                body.route,
                body.assessment,
                [turn.to_turn() for turn in body.history],
                body.user_message,
            )
        except InvalidRequestError as e:
            return _error(400, str(e))
        except Exception:
            logger.exception("Chat failed for %r", body.route)
            return _error(500, GENERIC_ERROR)
        return JSONResponse(content=ChatResponse(reply=reply).model_dump())

    return app
