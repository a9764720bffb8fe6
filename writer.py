"""
writer.py — Persist a component and its index re-export.

Layout:
    <output_directory>/<Name>/<Name>.jsx
    <output_directory>/<Name>/index.js   ->  export { default } from './<Name>';

The two writes are not atomic: if the index write fails after the component
write succeeded, the pair is left inconsistent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from config import AlreadyExistsError, ValidationError


def index_source(component_name: str) -> str:
    return f"export {{ default }} from './{component_name}';\n"


def write_component(
    output_directory: Union[str, Path],
    component_name: str,
    source_text: str,
    overwrite: bool = False,
) -> Path:
    """
    Write the component file and its index; return the component directory.

    Raises AlreadyExistsError, before touching the filesystem, when the
    component file exists and *overwrite* is False.  An existing directory on
    its own is not a conflict.  Names that are empty or would leave the
    output directory raise ValidationError.
    """
    if not component_name or any(ch in component_name for ch in "/\\."):
        raise ValidationError(f"Invalid component name '{component_name}'.")

    component_dir = Path(output_directory) / component_name
    component_file = component_dir / f"{component_name}.jsx"
    index_file = component_dir / "index.js"

    if component_file.exists() and not overwrite:
        raise AlreadyExistsError(f"Component {component_name} already exists.")

    component_dir.mkdir(parents=True, exist_ok=True)
    component_file.write_text(source_text, encoding="utf-8")
    index_file.write_text(index_source(component_name), encoding="utf-8")
    return component_dir
