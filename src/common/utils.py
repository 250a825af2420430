import json
from typing import Any


def to_json(o: Any) -> str:
    return json.dumps(o, ensure_ascii=False, separators=(",", ":"))
