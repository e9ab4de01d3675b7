"""Configuration for the cafe menu extraction service."""

from __future__ import annotations

import os


GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL_ID = os.getenv("GEMINI_MODEL_ID", "gemini-2.0-flash")

EXTRACTION_PROMPT = os.getenv(
    "EXTRACTION_PROMPT", "Generate details about the items in the menu"
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
