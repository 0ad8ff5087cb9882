from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from ..core.logging import setup_logging
from ..core.config import settings
from .routers import health, invoice

logger = setup_logging()
app = FastAPI(title="Oilfield Ticket Extractor")


# Methods outside the router's list never reach the endpoint; answer them the same way
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.warning(f"Unsupported method {request.method} on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content={"error": "Method not allowed"},
            headers=exc.headers,
        )
    return await default_http_exception_handler(request, exc)


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
        "Access-Control-Allow-Headers": (
            "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
            "Content-MD5, Content-Type, Date, X-Api-Version"
        ),
    }


# Same fixed CORS headers on every response, preflight and errors included
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(cors_headers())
    return response


app.include_router(health.router)
app.include_router(invoice.router)
