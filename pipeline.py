"""
pipeline.py — One-shot generation pipeline.

Flow

1.  Render the prompt from the resolved RequestConfig.
2.  Call the model once.
3.  Extract the code from the free-text response.
4.  Validate it — returns a STRUCTURED REPORT:
        { "is_valid": bool, "errors": [...], "warnings": [...] }
5.  If the call failed or validation failed, substitute the hand-written
    template for the chosen styling mode.
6.  Write <Name>/<Name>.jsx and <Name>/index.js.

There is no retry: each stage runs at most once.  In strict mode a failed call
aborts the run and an invalid component is written as extracted.

Progress goes to stdout; failures and validation findings go to stderr.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from config import GenerationTimeoutError, RemoteServiceError, RequestConfig
from extractor import extract_code
from generator import GenerationClient, build_prompt, format_component_name
from templates import render_fallback
from validator import validate_component
from writer import write_component


class Origin(str, Enum):
    GENERATED = "Generated"
    TEMPLATED = "Templated"


@dataclass(frozen=True)
class GeneratedArtifact:
    source_text: str
    component_name: str
    origin: Origin


def run_pipeline(
    config: RequestConfig,
    client: GenerationClient,
    *,
    verbose: bool = True,
) -> Path:
    """
    Produce the component for *config* and write it to disk.

    Returns
    -------
    Path
        Directory holding the component and index files.
    """
    artifact = generate_artifact(config, client, verbose=verbose)

    component_dir = write_component(
        config.output_directory,
        artifact.component_name,
        artifact.source_text,
        overwrite=config.overwrite_existing,
    )
    _log(verbose, f"Component {artifact.component_name} created successfully!")
    _log(verbose, f"Location: {component_dir}")
    return component_dir


def generate_artifact(
    config: RequestConfig,
    client: GenerationClient,
    *,
    verbose: bool = True,
) -> GeneratedArtifact:
    """Run every stage up to (but not including) the file write."""
    component_name = format_component_name(config.name)
    prompt = build_prompt(config)

    _log(verbose, f"Generating component with {config.model_id}...")
    try:
        raw = client.generate(config.model_id, prompt)
    except (RemoteServiceError, GenerationTimeoutError) as exc:
        _log_failure(f"Failed to generate component: {exc}")
        if config.strict:
            raise
        return _fallback(config, component_name, verbose)

    _log(verbose, "Component generated successfully.")
    if config.debug:
        _log(True, f"Generated text:\n{raw}")

    code = extract_code(raw)
    report = validate_component(code, component_name)
    _log_warnings(verbose, report["warnings"])

    if report["is_valid"]:
        _log(verbose, "Generated code passed validation.")
        return GeneratedArtifact(code, component_name, Origin.GENERATED)

    _log_failure(f"Generated code failed validation with {len(report['errors'])} error(s):")
    _log_errors(report["errors"])

    if config.strict:
        _log_failure("Strict mode: writing the extracted code unchanged.")
        return GeneratedArtifact(code, component_name, Origin.GENERATED)
    return _fallback(config, component_name, verbose)


def _fallback(config: RequestConfig, component_name: str, verbose: bool) -> GeneratedArtifact:
    _log(verbose, f"Falling back to the {config.styling_mode.value} template.")
    source = render_fallback(config.styling_mode, component_name, config.description)
    return GeneratedArtifact(source, component_name, Origin.TEMPLATED)


#
# Internal logging helpers
#

def _log(verbose: bool, message: str) -> None:
    """Print a progress message to stdout."""
    if verbose:
        print(message)


def _log_failure(message: str) -> None:
    """Print a failure to stderr; failures are never silenced."""
    print(message, file=sys.stderr)


def _log_errors(errors: List[str]) -> None:
    """Pretty-print hard validation errors to stderr."""
    for err in errors:
        print(f"    {err}", file=sys.stderr)


def _log_warnings(verbose: bool, warnings: List[str]) -> None:
    """Pretty-print soft validation warnings to stderr."""
    if not verbose:
        return
    for warn in warnings:
        print(f"    {warn}", file=sys.stderr)
