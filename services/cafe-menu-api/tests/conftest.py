from __future__ import annotations

import os
import sys
from pathlib import Path


SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
  sys.path.insert(0, str(SERVICE_ROOT))

os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
