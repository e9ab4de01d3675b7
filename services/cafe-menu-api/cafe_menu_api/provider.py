"""Gemini call-through used to run the extraction."""

from __future__ import annotations

import base64
import logging
from typing import Any
from typing import Mapping
from typing import Protocol

from google import genai
from google.genai import types

from cafe_menu_api.errors import ProviderInvocationFailure
from cafe_menu_api.pipeline import ProviderRequest


logger = logging.getLogger("cafe_menu_api")


class ExtractionProvider(Protocol):

  async def generate(self, request: ProviderRequest, api_key: str) -> Any:
    ...


class GeminiProvider:
  """Sends one image plus instruction to Gemini with a single tool."""

  async def generate(
      self, request: ProviderRequest, api_key: str
  ) -> types.GenerateContentResponse:
    declaration = request.function_declaration
    async with genai.Client(api_key=api_key).aio as client:
      return await client.models.generate_content(
          model=request.model_id,
          contents=[
              types.Content(
                  role="user",
                  parts=[
                      types.Part.from_bytes(
                          data=base64.b64decode(request.data),
                          mime_type=request.mime_type,
                      ),
                      types.Part.from_text(text=request.instruction),
                  ],
              )
          ],
          config=types.GenerateContentConfig(
              tools=[
                  types.Tool(
                      function_declarations=[
                          types.FunctionDeclaration(
                              name=declaration["name"],
                              description=declaration["description"],
                              parameters_json_schema=declaration["parameters"],
                          )
                      ]
                  )
              ],
          ),
      )


def _to_mapping(reply: Any) -> Any:
  if hasattr(reply, "model_dump"):
    return reply.model_dump(exclude_none=True)
  if isinstance(reply, Mapping):
    return dict(reply)
  return reply


async def invoke(
    provider: ExtractionProvider, request: ProviderRequest, api_key: str
) -> Any:
  """Awaits the provider and hands back its reply as plain data.

  Whatever the provider raises is reported as ProviderInvocationFailure.
  The reply shape is not checked here.
  """
  try:
    reply = await provider.generate(request, api_key)
    return _to_mapping(reply)
  except Exception as exc:
    logger.error(
        "provider_invocation_failed model_id=%s error=%s",
        request.model_id,
        repr(exc),
    )
    raise ProviderInvocationFailure() from exc
