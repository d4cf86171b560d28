import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import health, quotes, rates, stores
from app.core.config import get_settings
from app.core.errors import QuoterError

logger = logging.getLogger(__name__)


async def quoter_error_handler(request: Request, exc: QuoterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})
    first = errors[0]
    # drop the "body"/"query" prefix so the message names the field
    loc = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    app = FastAPI(title="Store Quoter", version="0.1.0")

    app.add_exception_handler(QuoterError, quoter_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Routers
    app.include_router(health.router, tags=["health"])
    app.include_router(rates.router, tags=["rates"])
    app.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
    app.include_router(stores.router, prefix="/stores", tags=["stores"])

    return app


app = create_app()
