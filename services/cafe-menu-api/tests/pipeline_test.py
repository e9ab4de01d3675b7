from __future__ import annotations

import pytest

from cafe_menu_api.errors import MalformedReply
from cafe_menu_api.errors import MissingConfiguration
from cafe_menu_api.errors import MissingInput
from cafe_menu_api.errors import NoExtractionFound
from cafe_menu_api.pipeline import build_provider_request
from cafe_menu_api.pipeline import parse_reply
from cafe_menu_api.pipeline import validate_payload
from cafe_menu_api.schema_registry import cafe_item_declaration
from cafe_menu_api.schemas import ExtractionRequest


def test_validate_payload_ok() -> None:
  request = validate_payload({"base64": "AAA", "mimeType": "image/png"}, "key")
  assert request.base64 == "AAA"
  assert request.mime_type == "image/png"


def test_validate_payload_ignores_extra_fields() -> None:
  request = validate_payload(
      {"base64": "AAA", "mimeType": "image/jpeg", "note": "x"}, "key"
  )
  assert request.mime_type == "image/jpeg"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "AAA",
        {"base64": 0, "mimeType": "image/png"},
        {"base64": 123, "mimeType": "image/png"},
        {"base64": "AAA", "mimeType": ["image/png"]},
    ],
)
def test_validate_payload_missing_input(payload: object) -> None:
  with pytest.raises(MissingInput) as exc_info:
    validate_payload(payload, "key")
  assert exc_info.value.status_code == 400
  assert exc_info.value.message == "Missing base64 or mimeType"


def test_validate_payload_checks_key_first() -> None:
  with pytest.raises(MissingConfiguration) as exc_info:
    validate_payload({}, "")
  assert exc_info.value.status_code == 500
  assert exc_info.value.message == "Missing GEMINI_API_KEY"


def test_build_provider_request() -> None:
  declaration = cafe_item_declaration()
  request = build_provider_request(
      ExtractionRequest(base64="AAA", mimeType="image/webp"),
      declaration,
      model_id="gemini-2.0-flash",
      instruction="Generate details about the items in the menu",
  )
  assert request.model_id == "gemini-2.0-flash"
  assert request.instruction == "Generate details about the items in the menu"
  assert request.mime_type == "image/webp"
  assert request.data == "AAA"
  assert request.function_declaration == declaration


def test_parse_reply_maps_calls_in_order() -> None:
  reply = {
      "candidates": [
          {
              "content": {
                  "parts": [
                      {"function_call": {"name": "cafe_item", "args": {"name": "A"}}},
                      {"text": "skip me"},
                      {"function_call": {}},
                      {"functionCall": {"name": "cafe_item", "args": {"name": "B"}}},
                  ]
              }
          },
          {"content": {"parts": [{"function_call": {"name": "ignored"}}]}},
      ]
  }
  calls = parse_reply(reply)
  assert [(c.functionName, c.arguments) for c in calls] == [
      ("cafe_item", {"name": "A"}),
      ("cafe_item", {"name": "B"}),
  ]


def test_parse_reply_missing_args() -> None:
  reply = {"candidates": [{"content": {"parts": [{"function_call": {"name": "cafe_item"}}]}}]}
  (call,) = parse_reply(reply)
  assert call.model_dump() == {"functionName": "cafe_item", "arguments": {}}


@pytest.mark.parametrize(
    "reply",
    [
        None,
        [],
        {"candidates": None},
        {"candidates": {"content": {"parts": []}}},
        {"candidates": ["text"]},
        {"candidates": [{"content": None}]},
        {"candidates": [{"content": {"parts": None}}]},
    ],
)
def test_parse_reply_malformed(reply: object) -> None:
  with pytest.raises(MalformedReply):
    parse_reply(reply)


@pytest.mark.parametrize(
    "parts",
    [[], [{"text": "A menu."}], [{"function_call": None}, "junk"]],
)
def test_parse_reply_no_calls(parts: list) -> None:
  with pytest.raises(NoExtractionFound):
    parse_reply({"candidates": [{"content": {"parts": parts}}]})
