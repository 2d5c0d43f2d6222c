from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

PACKAGE_ROOT = Path(__file__).resolve().parent
RULES_DIR = PACKAGE_ROOT / "rules"


@lru_cache(maxsize=32)
def load_rule_set(name: str) -> dict[str, Any]:
    path = RULES_DIR / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Rule set not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"Rule set must be a JSON object: {path}")
    return payload
