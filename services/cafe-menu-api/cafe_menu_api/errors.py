"""Failure kinds raised while handling an extraction request.

Each kind carries the HTTP status and the message that ends up in the
``{"error": ...}`` envelope returned to the caller.
"""

from __future__ import annotations

from fastapi import status


class ExtractionError(Exception):
  status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
  message = "Internal server error"

  def __init__(self, message: str | None = None) -> None:
    if message is not None:
      self.message = message
    super().__init__(self.message)


class MissingInput(ExtractionError):
  status_code = status.HTTP_400_BAD_REQUEST
  message = "Missing base64 or mimeType"


class MissingConfiguration(ExtractionError):
  # Deployment fault, still reported as a 500.
  status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
  message = "Missing GEMINI_API_KEY"


class ProviderInvocationFailure(ExtractionError):
  status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
  message = "Internal server error"


class MalformedReply(ExtractionError):
  status_code = status.HTTP_400_BAD_REQUEST
  message = "No content parts returned from Gemini"


class NoExtractionFound(ExtractionError):
  status_code = status.HTTP_400_BAD_REQUEST
  message = "No function calls found in response"


class InternalError(ExtractionError):
  status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
  message = "Internal server error"
