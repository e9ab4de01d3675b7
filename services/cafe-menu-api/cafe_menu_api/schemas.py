"""Request/response schemas for the cafe menu extraction API."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ExtractionRequest(BaseModel):
  model_config = ConfigDict(frozen=True, populate_by_name=True)

  base64: str = Field(..., min_length=1)
  mime_type: str = Field(..., alias="mimeType", min_length=1)


class SizeOption(BaseModel):
  size: str
  price: float


class CafeItem(BaseModel):
  """Shape of the arguments of a ``cafe_item`` call, for API docs only."""

  name: str
  category: str
  size_options: List[SizeOption]
  dairy_options: List[str]
  tags: List[str]
  description: str
  form_options: Optional[List[str]] = None


class FunctionCallResult(BaseModel):
  model_config = ConfigDict(frozen=True)

  functionName: str
  arguments: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
  error: str


class CafeItemCall(BaseModel):
  functionName: str
  arguments: CafeItem
