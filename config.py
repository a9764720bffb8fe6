"""
config.py — Request configuration, runtime settings and error taxonomy.

Everything a run needs is resolved once and handed explicitly to each stage:

    Settings       — process-wide configuration (API credential, timeout)
    RequestConfig  — one fully-populated generation request

No stage reads the environment on its own; only load_settings() does.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

API_KEY_ENV: str = "GROQ_API_KEY"

DEFAULT_MODEL: str = "llama-3.3-70b-versatile"
DEFAULT_OUTPUT_DIR: str = "src/components"
DEFAULT_TIMEOUT_SECONDS: float = 60.0


# ──────────────────────────────────────────────
# Error taxonomy
# ──────────────────────────────────────────────

class ComponentGeneratorError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigurationError(ComponentGeneratorError):
    """Required process configuration (the API credential) is missing."""


class ValidationError(ComponentGeneratorError):
    """An interactively supplied value is empty or not acceptable."""


class RemoteServiceError(ComponentGeneratorError):
    """The generation endpoint answered with a failure status."""

    def __init__(self, status: Optional[int], body: str) -> None:
        self.status = status
        self.body = body
        if status is None:
            message = f"Generation request failed: {body}"
        else:
            message = f"Generation request failed with status {status}: {body}"
        super().__init__(message)


class GenerationTimeoutError(ComponentGeneratorError, TimeoutError):
    """No response arrived from the generation endpoint in time."""


class AlreadyExistsError(ComponentGeneratorError):
    """The target component file exists and overwriting was not requested."""


# ──────────────────────────────────────────────
# Styling mode
# ──────────────────────────────────────────────

class StylingMode(str, Enum):
    NONE = "None"
    TAILWIND = "Tailwind"
    BOOTSTRAP = "Bootstrap"

    @classmethod
    def from_flags(cls, tailwind: bool, bootstrap: bool) -> Optional["StylingMode"]:
        """
        Collapse the two CLI flags into one mode.

        Bootstrap takes precedence when both are set.  Returns None when neither
        flag was given so the caller can ask interactively.
        """
        if bootstrap:
            return cls.BOOTSTRAP
        if tailwind:
            return cls.TAILWIND
        return None

    @classmethod
    def parse(cls, answer: str) -> "StylingMode":
        """Accept a menu number (1-3) or a case-insensitive mode name."""
        text = answer.strip().lower()
        if not text:
            return cls.NONE
        modes = list(cls)
        if text.isdigit() and 1 <= int(text) <= len(modes):
            return modes[int(text) - 1]
        for mode in modes:
            if mode.value.lower() == text:
                return mode
        raise ValidationError(
            f"Unknown CSS framework '{answer.strip()}'. "
            f"Choose one of: {', '.join(m.value for m in modes)}."
        )


# ──────────────────────────────────────────────
# Resolved values
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class RequestConfig:
    name: str
    description: str
    styling_mode: StylingMode = StylingMode.NONE
    model_id: str = DEFAULT_MODEL
    output_directory: str = DEFAULT_OUTPUT_DIR
    overwrite_existing: bool = False
    debug: bool = False
    strict: bool = False


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS


_MISSING_KEY_HELP = (
    f"{API_KEY_ENV} environment variable is not set.\n"
    "Export it or add it to a .env file in the current directory:\n"
    f"  Windows (CMD):        set {API_KEY_ENV}=your-api-key-here\n"
    f'  Windows (PowerShell): $env:{API_KEY_ENV}="your-api-key-here"\n'
    f'  macOS/Linux:          export {API_KEY_ENV}="your-api-key-here"'
)


def load_settings() -> Settings:
    """Read the API credential once; raise ConfigurationError if absent."""
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigurationError(_MISSING_KEY_HELP)
    return Settings(api_key=api_key)
