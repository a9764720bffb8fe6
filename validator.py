"""
validator.py — Deterministic lexical checks for generated React components.

Architecture

Validation is split into independent sub-validators, each responsible for a
distinct concern:

    validate_structure()      — import / named definition / default export present
    validate_contamination()  — leaked diagnostics, HTML tables, echoed instructions
    validate_syntax()         — stack-based bracket/brace/parenthesis balance

The top-level validate_component() aggregates them into a structured report:

    {
        "is_valid": bool,        # True only when errors list is empty
        "errors":   List[str],   # Hard failures — trigger the template fallback
        "warnings": List[str],   # Soft notices — informational, not blocking
    }

Bracket balance is reported as warnings only; acceptance depends solely on the
structure and contamination checks.  Nothing is parsed or executed.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

#
# Constants
#

_REACT_IMPORT = re.compile(r"\bimport\b[^;\n]*\breact\b", re.IGNORECASE)

_DEFAULT_EXPORT = re.compile(r"\bexport\s+default\b")

_CONTAMINATION_MARKERS: List[Tuple[re.Pattern[str], str]] = [
    (
        re.compile(r"[\w./\\-]+\.(?:jsx?|tsx?):\d*"),
        "a file path with line number (build or stack-trace output)",
    ),
    (
        re.compile(r"</?(?:table|thead|tbody|tr|td|th)\b", re.IGNORECASE),
        "raw HTML table markup",
    ),
    (
        re.compile(r"The component should be", re.IGNORECASE),
        "an echoed prompt instruction",
    ),
]


#
# Public top-level validator
#

def validate_component(code: str, component_name: str) -> Dict:
    """
    Run all sub-validators and return a structured validation report.

    Parameters
    ----------
    code : str
        Extracted component source.
    component_name : str
        PascalCase name the component must be declared under.
    """
    errors: List[str] = []
    warnings: List[str] = []

    errors.extend(validate_structure(code, component_name))
    errors.extend(validate_contamination(code))

    warnings.extend(validate_syntax(code))

    return {
        "is_valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def is_valid_component(code: str, component_name: str) -> bool:
    """Boolean form of validate_component()."""
    return validate_component(code, component_name)["is_valid"]


#
# Sub-validator 1 — Component structure
#

def validate_structure(code: str, component_name: str) -> List[str]:
    """
    Checks
    ------
    * An import statement referencing react.
    * A function/const/let/var declaration binding exactly *component_name*.
    * An ``export default`` statement.
    """
    errors: List[str] = []

    if not _REACT_IMPORT.search(code):
        errors.append(
            "MISSING_IMPORT: No import statement referencing React was found."
        )

    definition = re.compile(
        r"\b(?:function|const|let|var)\s+" + re.escape(component_name) + r"\s*[=(]"
    )
    if not definition.search(code):
        errors.append(
            f"MISSING_DEFINITION: No function/const/let/var declaration named "
            f"'{component_name}' was found."
        )

    if not _DEFAULT_EXPORT.search(code):
        errors.append(
            "MISSING_EXPORT: No 'export default' statement was found."
        )

    return errors


#
# Sub-validator 2 — Contamination markers
#

def validate_contamination(code: str) -> List[str]:
    """Reject output in which the model leaked non-code text."""
    errors: List[str] = []
    for pattern, label in _CONTAMINATION_MARKERS:
        match = pattern.search(code)
        if match:
            errors.append(
                f"CONTAMINATED_OUTPUT: Found {label}: '{match.group(0)}'."
            )
    return errors


#
# Sub-validator 3 — Bracket / brace / parenthesis balance
#

# Quoted strings stop at end of line so an apostrophe in JSX text does not
# swallow the rest of the file.
_SCAN_TOKENS = re.compile(
    r"(?P<skip>'(?:\\.|[^'\\\n])*'"
    r"|\"(?:\\.|[^\"\\\n])*\""
    r"|`(?:\\.|[^`\\])*`"
    r"|//[^\n]*"
    r"|/\*[\s\S]*?\*/)"
    r"|(?P<bracket>[()\[\]{}])"
)

_PAIRS = {")": "(", "]": "[", "}": "{"}


def validate_syntax(code: str) -> List[str]:
    """Report unbalanced brackets outside strings and comments, as warnings."""
    warnings: List[str] = []
    stack: List[Tuple[str, int]] = []

    for match in _SCAN_TOKENS.finditer(code):
        ch = match.group("bracket")
        if ch is None:
            continue
        line = code.count("\n", 0, match.start()) + 1

        if ch not in _PAIRS:
            stack.append((ch, line))
        elif not stack:
            warnings.append(
                f"UNBALANCED_BRACKETS: Unexpected '{ch}' on line {line} "
                f"with no matching opener."
            )
        else:
            opener, opener_line = stack.pop()
            if opener != _PAIRS[ch]:
                warnings.append(
                    f"UNBALANCED_BRACKETS: '{ch}' on line {line} does not match "
                    f"'{opener}' opened on line {opener_line}."
                )

    for opener, opener_line in stack:
        warnings.append(
            f"UNBALANCED_BRACKETS: '{opener}' opened on line {opener_line} is never closed."
        )
    return warnings
