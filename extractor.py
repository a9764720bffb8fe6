"""
extractor.py — Isolate component source from free-text model output.

Models frequently echo the prompt, wrap the code in markdown fences or trail
off into build logs.  extract_code() tries, in order:

    1. the interior of the first fenced block
    2. the span from the first React import to the first default export
    3. the raw text minus known instruction / diagnostic boilerplate

It never raises; text with no recognisable markers comes back trimmed.
"""

from __future__ import annotations

import re
from typing import List, Optional

_FENCED_BLOCK = re.compile(
    r"```[ \t]*(?:(?:javascript|typescript|react|jsx|tsx|js|ts)\b)?([\s\S]*?)```",
    re.IGNORECASE,
)

_REACT_IMPORT = re.compile(r"^[ \t]*(import\b[^\n]*react)", re.IGNORECASE | re.MULTILINE)

_DEFAULT_EXPORT = re.compile(r"export\s+default\s+[A-Za-z_$][\w$]*\s*;")

# Prompt sentences the model tends to echo back, plus trailing build output.
_BOILERPLATE: List[re.Pattern[str]] = [
    re.compile(r"The component should be [^\n]*?(?:CSS framework|for styling)\.?", re.IGNORECASE),
    re.compile(r"Include imports[^\n]*?export\.?", re.IGNORECASE),
    re.compile(r"Only provide [^\n]*?explanation\.?", re.IGNORECASE),
    re.compile(r"BUILD SUCCESS[\s\S]*$"),
]


def extract_code(text: str) -> str:
    """Return the part of *text* that most plausibly is the component source."""
    fenced = _first_fenced_block(text)
    if fenced is not None:
        return fenced

    spanned = _import_export_span(text)
    if spanned is not None:
        return spanned

    return strip_boilerplate(text)


def strip_boilerplate(text: str) -> str:
    """Remove echoed instructions and trailing build diagnostics."""
    for pattern in _BOILERPLATE:
        text = pattern.sub("", text)
    return text.strip()


# ──────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────

def _first_fenced_block(text: str) -> Optional[str]:
    match = _FENCED_BLOCK.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def _import_export_span(text: str) -> Optional[str]:
    start_match = _REACT_IMPORT.search(text)
    if not start_match:
        return None

    start = start_match.start(1)
    end_match = _DEFAULT_EXPORT.search(text, start)
    if end_match:
        return text[start:end_match.end()].strip()
    return text[start:].strip()
