"""FastAPI app extracting cafe menu items from an image via Gemini."""

from __future__ import annotations

import logging
import time
import traceback
import uuid
from typing import Dict
from typing import List

from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from cafe_menu_api import settings
from cafe_menu_api.errors import ExtractionError
from cafe_menu_api.errors import InternalError
from cafe_menu_api.pipeline import build_provider_request
from cafe_menu_api.pipeline import parse_reply
from cafe_menu_api.pipeline import validate_payload
from cafe_menu_api.provider import ExtractionProvider
from cafe_menu_api.provider import GeminiProvider
from cafe_menu_api.provider import invoke
from cafe_menu_api.schema_registry import cafe_item_declaration
from cafe_menu_api.schemas import CafeItemCall
from cafe_menu_api.schemas import ErrorResponse
from cafe_menu_api.schemas import FunctionCallResult

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type"
    ),
}

app = FastAPI(title="Cafe Menu Extraction API", version="1.0.0")
logger = logging.getLogger("cafe_menu_api")
if not logger.handlers:
  logging.basicConfig(
      level=settings.LOG_LEVEL,
      format="%(asctime)s %(levelname)s %(name)s %(message)s",
  )


def get_provider() -> ExtractionProvider:
  return GeminiProvider()


def _error_response(exc: ExtractionError) -> JSONResponse:
  return JSONResponse(
      status_code=exc.status_code,
      content=ErrorResponse(error=exc.message).model_dump(),
      headers=CORS_HEADERS,
  )


def _success_response(calls: List[FunctionCallResult]) -> JSONResponse:
  return JSONResponse(
      status_code=status.HTTP_200_OK,
      content=[call.model_dump() for call in calls],
      headers=CORS_HEADERS,
  )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    _: Request, exc: StarletteHTTPException
) -> JSONResponse:
  headers = dict(exc.headers or {})
  headers.update(CORS_HEADERS)
  return JSONResponse(
      status_code=exc.status_code,
      content=ErrorResponse(error=str(exc.detail)).model_dump(),
      headers=headers,
  )


@app.get("/healthz")
def healthz() -> Dict[str, bool]:
  return {"ok": True}


@app.get("/readyz")
def readyz() -> JSONResponse:
  if not settings.GEMINI_API_KEY:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"ready": False, "missing": ["GEMINI_API_KEY"]},
    )
  return JSONResponse(status_code=status.HTTP_200_OK, content={"ready": True})


@app.options("/{path:path}")
def preflight_endpoint() -> Response:
  return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@app.post(
    "/{path:path}",
    response_model=None,
    responses={
        200: {"model": List[CafeItemCall]},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def extract_menu_endpoint(
    request: Request, provider: ExtractionProvider = Depends(get_provider)
) -> JSONResponse:
  request_id = str(uuid.uuid4())
  started = time.perf_counter()
  try:
    payload = await request.json()
    extraction_request = validate_payload(payload, settings.GEMINI_API_KEY)
    logger.info(
        "extract_menu_request_started request_id=%s model_id=%s "
        "mime_type=%s base64_len=%s",
        request_id,
        settings.GEMINI_MODEL_ID,
        extraction_request.mime_type,
        len(extraction_request.base64),
    )
    provider_request = build_provider_request(
        extraction_request,
        cafe_item_declaration(),
        model_id=settings.GEMINI_MODEL_ID,
        instruction=settings.EXTRACTION_PROMPT,
    )
    reply = await invoke(provider, provider_request, settings.GEMINI_API_KEY)
    calls = parse_reply(reply)
  except ExtractionError as exc:
    logger.warning(
        "extract_menu_request_rejected request_id=%s kind=%s status=%s",
        request_id,
        type(exc).__name__,
        exc.status_code,
    )
    return _error_response(exc)
  except Exception as exc:
    logger.error(
        "extract_menu_request_failed request_id=%s error=%s traceback=%s",
        request_id,
        repr(exc),
        traceback.format_exc(),
    )
    return _error_response(InternalError())

  timing_ms = int((time.perf_counter() - started) * 1000)
  logger.info(
      "extract_menu_request_succeeded request_id=%s calls=%s timing_ms=%s",
      request_id,
      len(calls),
      timing_ms,
  )
  return _success_response(calls)
