"""The function declaration Gemini is asked to fill for every menu item."""

from __future__ import annotations

import copy
from typing import Any
from typing import Dict


CAFE_ITEM_FUNCTION_NAME = "cafe_item"

_CAFE_ITEM_DECLARATION: Dict[str, Any] = {
    "name": CAFE_ITEM_FUNCTION_NAME,
    "description": "Details about an item served in a Cafe",
    "parameters": {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the item as printed on the menu.",
            },
            "category": {
                "type": "string",
                "description": (
                    "Menu section the item belongs to, e.g. coffee, tea, "
                    "cold drinks, pastries or food."
                ),
            },
            "size_options": {
                "type": "array",
                "description": "Every size the item is sold in with its price.",
                "items": {
                    "type": "object",
                    "properties": {
                        "size": {
                            "type": "string",
                            "description": "Size label, e.g. small or 12oz.",
                        },
                        "price": {
                            "type": "number",
                            "description": "Price for this size.",
                        },
                    },
                    "required": ["size", "price"],
                },
            },
            "dairy_options": {
                "type": "array",
                "description": "Milk choices offered, e.g. oat or whole milk.",
                "items": {"type": "string"},
            },
            "tags": {
                "type": "array",
                "description": "Short labels such as vegan, hot or seasonal.",
                "items": {"type": "string"},
            },
            "description": {
                "type": "string",
                "description": "Short description of the item.",
            },
            "form_options": {
                "type": "array",
                "description": "Serving forms, e.g. hot, iced or blended.",
                "items": {"type": "string"},
            },
        },
        "required": [
            "name",
            "category",
            "size_options",
            "dairy_options",
            "tags",
            "description",
        ],
    },
}


def cafe_item_declaration() -> Dict[str, Any]:
  """Returns a private copy of the ``cafe_item`` declaration.

  The module-level value is never handed out, so every request sees the
  same declaration no matter what a caller does with its copy.
  """
  return copy.deepcopy(_CAFE_ITEM_DECLARATION)
