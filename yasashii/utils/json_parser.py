"""
JSON parsing utilities for LLM responses.
"""

import json
import re
from typing import Any, List, Optional


def _loads_or_none(s: str) -> Optional[Any]:
    try:
        return json.loads(s)
    except (json.JSONDecodeError, TypeError, ValueError):
        return None


def extract_json_array(text: str, wrapper_keys: tuple = ("items", "entries", "results")) -> Optional[List[Any]]:
    """
    Extract a JSON array from a model response.

    Accepts, in order of preference:
    1) the whole response as a JSON array
    2) a ```json fenced block containing an array
    3) the outermost [...] span of the response
    A JSON object with a single list under one of ``wrapper_keys`` is also
    accepted, since models sometimes wrap arrays despite the schema.

    Args:
        text: The text response from the LLM
        wrapper_keys: Object keys that may hold the array

    Returns:
        The list if one was found, otherwise None
    """
    if not text or text.strip() == "":
        return None

    def _as_list(data: Any) -> Optional[List[Any]]:
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in wrapper_keys:
                if isinstance(data.get(key), list):
                    return data[key]
        return None

    s = text.strip()

    # 1) Full-document JSON
    found = _as_list(_loads_or_none(s))
    if found is not None:
        return found

    # 2) Code-fenced JSON
    m = re.search(r"```(?:json)?\s*([\s\S]*?)```", s)
    if m:
        found = _as_list(_loads_or_none(m.group(1).strip()))
        if found is not None:
            return found

    # 3) Outermost brackets
    first = s.find("[")
    last = s.rfind("]")
    if first != -1 and last > first:
        found = _as_list(_loads_or_none(s[first:last + 1]))
        if found is not None:
            return found

    return None
