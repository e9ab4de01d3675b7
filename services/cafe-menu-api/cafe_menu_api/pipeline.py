"""Validation, request building and reply parsing for menu extraction.

Everything here is synchronous and free of I/O; the provider call itself
lives in ``cafe_menu_api.provider``.
"""

from __future__ import annotations

import dataclasses
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional

from cafe_menu_api.errors import MalformedReply
from cafe_menu_api.errors import MissingConfiguration
from cafe_menu_api.errors import MissingInput
from cafe_menu_api.errors import NoExtractionFound
from cafe_menu_api.schemas import ExtractionRequest
from cafe_menu_api.schemas import FunctionCallResult


@dataclasses.dataclass(frozen=True)
class ProviderRequest:
  model_id: str
  instruction: str
  mime_type: str
  data: str
  function_declaration: Dict[str, Any]


def validate_payload(payload: Any, api_key: str) -> ExtractionRequest:
  if not api_key:
    raise MissingConfiguration()

  if not isinstance(payload, Mapping):
    raise MissingInput()
  data = payload.get("base64")
  mime_type = payload.get("mimeType")
  if not data or not mime_type:
    raise MissingInput()
  if not isinstance(data, str) or not isinstance(mime_type, str):
    raise MissingInput()
  return ExtractionRequest(base64=data, mimeType=mime_type)


def build_provider_request(
    request: ExtractionRequest,
    declaration: Dict[str, Any],
    model_id: str,
    instruction: str,
) -> ProviderRequest:
  return ProviderRequest(
      model_id=model_id,
      instruction=instruction,
      mime_type=request.mime_type,
      data=request.base64,
      function_declaration=declaration,
  )


def _get(value: Any, key: str) -> Any:
  if isinstance(value, Mapping):
    return value.get(key)
  return None


def _reply_parts(reply: Any) -> Optional[List[Any]]:
  """Follows ``candidates[0].content.parts``; None if any link is missing."""
  candidates = _get(reply, "candidates")
  if not isinstance(candidates, list) or not candidates:
    return None
  content = _get(candidates[0], "content")
  parts = _get(content, "parts")
  if not isinstance(parts, list):
    return None
  return parts


def _function_call(part: Any) -> Optional[Mapping[str, Any]]:
  call = _get(part, "function_call") or _get(part, "functionCall")
  if isinstance(call, Mapping) and call:
    return call
  return None


def parse_reply(reply: Any) -> List[FunctionCallResult]:
  parts = _reply_parts(reply)
  if parts is None:
    raise MalformedReply()

  calls = []
  for part in parts:
    call = _function_call(part)
    if call is None:
      continue
    calls.append(
        FunctionCallResult(
            functionName=call.get("name") or "",
            arguments=call.get("args") or {},
        )
    )

  if not calls:
    raise NoExtractionFound()
  return calls
