# domain/escaping.py
from __future__ import annotations

from typing import Any, List, Tuple

# "&" first so references added by later replacements are not escaped again.
_HTML_REPLACEMENTS: List[Tuple[str, str]] = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]


def escape_html(value: Any) -> str:
    text = str(value)
    for char, reference in _HTML_REPLACEMENTS:
        text = text.replace(char, reference)
    return text
