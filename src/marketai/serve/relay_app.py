"""FastAPI relay for the OpenAI chat-completions API.

Keeps the API key server-side and forwards one chat request per call.

Endpoints:
- POST /api/generate  { "messages": [{"role": "user", "content": "..."}] }
- OPTIONS *           CORS preflight, empty 200
"""
from __future__ import annotations
import logging
import os

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketai.common.logging_setup import setup_logging
from marketai.common.schema import RelayPayload
from marketai.common.upstream import auth_headers, build_upstream_payload, completions_url

LOGGER = logging.getLogger("marketai.serve.relay")
setup_logging()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
UPSTREAM_URL = completions_url()
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "120"))

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

app = FastAPI(title="MarketAI relay", docs_url=None, redoc_url=None, openapi_url=None)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.on_event("startup")
def _check_credential_on_startup() -> None:
    """Warn early when the relay cannot forward anything."""
    if not OPENAI_API_KEY:
        LOGGER.warning("OPENAI_API_KEY is not set; /api/generate will answer 500")
    LOGGER.info("Relaying to %s", UPSTREAM_URL)


@app.middleware("http")
async def cors(request: Request, call_next):  # noqa: ANN001
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and known paths with the wrong method are both "not found".
    if exc.status_code in (404, 405):
        return _error(404, "Not found")
    return _error(exc.status_code, str(exc.detail))


@app.post("/api/generate")
async def generate(request: Request) -> Response:
    body = await request.body()
    try:
        payload = RelayPayload.model_validate_json(body)
    except ValidationError:
        return _error(400, "Invalid request format")

    if not OPENAI_API_KEY:
        return _error(500, "OpenAI API key not configured")

    try:
        async with httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT) as client:
            r = await client.post(
                UPSTREAM_URL,
                headers=auth_headers(OPENAI_API_KEY),
                json=build_upstream_payload(payload.messages),
            )
    except httpx.HTTPError as e:
        LOGGER.error("Upstream request failed: %s", e)
        return _error(500, "Failed to connect to OpenAI")

    if r.status_code >= 400:
        LOGGER.warning("Upstream answered %s", r.status_code)
    return Response(content=r.content, status_code=r.status_code, media_type="application/json")
