"""
generator.py — Groq-backed React component generator.

Responsibilities
────────────────
• Normalise the user's component name to PascalCase.
• Build the instruction prompt from a resolved RequestConfig.
• Call the Groq API exactly once and return the **raw response text**
  (extraction and validation happen downstream).
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional

import groq
from groq import Groq

from config import (
    GenerationTimeoutError,
    RemoteServiceError,
    RequestConfig,
    Settings,
    StylingMode,
)

# ──────────────────────────────────────────────
# Component naming
# ──────────────────────────────────────────────

_WORD_SEPARATORS = re.compile(r"[-_\s]+")


def format_component_name(name: str) -> str:
    """Capitalise every -, _ or whitespace delimited word and join them."""
    words = [w for w in _WORD_SEPARATORS.split(name.strip()) if w]
    return "".join(w[:1].upper() + w[1:] for w in words)


# ──────────────────────────────────────────────
# Prompt construction
# ──────────────────────────────────────────────

STYLING_CLAUSES: Dict[StylingMode, str] = {
    StylingMode.NONE: "without any CSS framework",
    StylingMode.TAILWIND: "using Tailwind CSS for styling",
    StylingMode.BOOTSTRAP: "using Bootstrap for styling",
}


def build_prompt(config: RequestConfig) -> str:
    """Render the instruction sent to the model.  Pure and deterministic."""
    return f"""\
Generate a complete React functional component named {format_component_name(config.name)} with the following specifications:
{config.description}

The component should be {STYLING_CLAUSES[config.styling_mode]}.
Include imports, prop types, and a default export.
Only provide the JavaScript/JSX code without explanation.
"""


# ──────────────────────────────────────────────
# Response coercion
# ──────────────────────────────────────────────

def coerce_generated_text(payload: Any) -> str:
    """
    Reduce whatever the endpoint returned to a single string.

    Accepted shapes
    ---------------
    * a list of results              -> the first one is used
    * a mapping with generated_text  -> that value
    * a chat completion object       -> first choice's message content
    * a string                       -> unchanged
    Anything else is rendered with json.dumps / str().
    """
    if isinstance(payload, (list, tuple)):
        payload = payload[0] if payload else ""

    if isinstance(payload, str):
        return payload

    if isinstance(payload, dict):
        if "generated_text" in payload:
            return str(payload["generated_text"])
        return json.dumps(payload)

    choices: Optional[List[Any]] = getattr(payload, "choices", None)
    if choices:
        message = getattr(choices[0], "message", None)
        if message is not None:
            return getattr(message, "content", None) or ""

    return str(payload)


# ──────────────────────────────────────────────
# Groq client
# ──────────────────────────────────────────────

class GenerationClient:
    """
    Single-shot client for the Groq chat-completions endpoint.

    The SDK's internal retries are switched off: one request per run, and any
    failure surfaces as RemoteServiceError or GenerationTimeoutError.
    """

    def __init__(self, settings: Settings, client: Optional[Any] = None) -> None:
        self.settings = settings
        self._client = client or Groq(
            api_key=settings.api_key,
            timeout=settings.timeout,
            max_retries=0,
        )

    def generate(self, model_id: str, prompt: str) -> str:
        """Send *prompt* to *model_id* and return the raw response text."""
        try:
            response = self._client.chat.completions.create(
                model=model_id,
                temperature=0.2,
                messages=[{"role": "user", "content": prompt}],
            )
        except groq.APITimeoutError as exc:
            raise GenerationTimeoutError(
                f"No response from model '{model_id}' within "
                f"{self.settings.timeout:g} seconds."
            ) from exc
        except groq.APIStatusError as exc:
            raise RemoteServiceError(exc.status_code, _error_body(exc)) from exc
        except groq.APIConnectionError as exc:
            raise RemoteServiceError(None, str(exc)) from exc
        except groq.APIError as exc:
            # e.g. APIResponseValidationError: a reply the SDK could not parse
            raise RemoteServiceError(None, str(exc)) from exc

        return coerce_generated_text(response)


def _error_body(exc: "groq.APIStatusError") -> str:
    """Best-effort textual body of a failed response."""
    if exc.body is not None:
        return exc.body if isinstance(exc.body, str) else json.dumps(exc.body)
    return exc.response.text
