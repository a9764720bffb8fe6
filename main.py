"""
main.py — CLI entry-point for the React component generator.

Usage
─────
    react-component-generator
    react-component-generator --name user-card --prompt "Shows an avatar" --tailwind

Any of name, description or CSS framework that is not given on the command line
is asked for interactively.  GROQ_API_KEY must be set (environment or .env)
before anything else happens.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, List, Optional

from config import (
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_DIR,
    AlreadyExistsError,
    ComponentGeneratorError,
    RequestConfig,
    StylingMode,
    ValidationError,
    load_settings,
)

__version__ = "1.0.0"

Ask = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="react-component-generator",
        description="Generate React components using AI",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-n", "--name", help="Component name")
    parser.add_argument("-p", "--prompt", help="Component description/prompt")
    parser.add_argument(
        "-m", "--model", default=DEFAULT_MODEL,
        help=f"Groq model to use (default: {DEFAULT_MODEL})",
    )
    parser.add_argument("-t", "--tailwind", action="store_true", help="Use Tailwind CSS")
    parser.add_argument("-b", "--bootstrap", action="store_true", help="Use Bootstrap")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing components")
    parser.add_argument(
        "-d", "--debug", action="store_true",
        help="Print the raw model response before extraction",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Abort on generation failure instead of using a template",
    )
    return parser


# ──────────────────────────────────────────────
# Input resolution
# ──────────────────────────────────────────────

def _ask_required(ask: Ask, question: str, label: str) -> str:
    answer = ask(question).strip()
    if not answer:
        raise ValidationError(f"{label} is required")
    return answer


_COMPONENT_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")


def _check_component_name(name: str) -> None:
    """The PascalCase form becomes a directory and file name, so it must be an identifier."""
    from generator import format_component_name

    component_name = format_component_name(name)
    if not _COMPONENT_IDENTIFIER.fullmatch(component_name):
        raise ValidationError(
            f"Component name '{name}' does not form a valid component identifier"
            + (f" (got '{component_name}')." if component_name else ".")
        )


def _ask_styling_mode(ask: Ask) -> StylingMode:
    print("Choose a CSS framework:")
    for number, mode in enumerate(StylingMode, start=1):
        print(f"  {number}) {mode.value}")
    return StylingMode.parse(ask("Framework [1]: "))


def resolve_request(args: argparse.Namespace, ask: Ask = input) -> RequestConfig:
    """
    Merge parsed flags with interactive answers for whatever is missing.

    Questions are asked one at a time in the order name, description,
    CSS framework, model.
    """
    name = (args.name or "").strip() or _ask_required(ask, "Component name: ", "Component name")
    _check_component_name(name)
    description = (args.prompt or "").strip() or _ask_required(
        ask, "Describe your component: ", "Component description"
    )

    if args.tailwind and args.bootstrap:
        print(
            "Warning: both --tailwind and --bootstrap given; using Bootstrap.",
            file=sys.stderr,
        )
    styling_mode = StylingMode.from_flags(args.tailwind, args.bootstrap)
    if styling_mode is None:
        styling_mode = _ask_styling_mode(ask)

    model_id = (args.model or "").strip() or (
        ask(f"Model [{DEFAULT_MODEL}]: ").strip() or DEFAULT_MODEL
    )

    return RequestConfig(
        name=name,
        description=description,
        styling_mode=styling_mode,
        model_id=model_id,
        output_directory=args.output,
        overwrite_existing=args.force,
        debug=args.debug,
        strict=args.strict,
    )


# ──────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────

def run(argv: Optional[List[str]] = None, ask: Ask = input) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    print("React Component Generator")

    try:
        settings = load_settings()
        config = resolve_request(args, ask)

        # Late import to keep top-level light and testable.
        from generator import GenerationClient
        from pipeline import run_pipeline

        run_pipeline(config, GenerationClient(settings))
    except AlreadyExistsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Use the --force flag to overwrite.", file=sys.stderr)
        return 1
    except ComponentGeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("\nError: input closed before all questions were answered.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130

    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
