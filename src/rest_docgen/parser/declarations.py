"""Declaration dump loader.

Reads a YAML (or JSON) dump produced by a source front end into a
DeclarationSet.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from rest_docgen.exceptions import DeclarationError
from .base import DeclarationSet

logger = logging.getLogger(__name__)


def parse_declarations(file_path: Path) -> DeclarationSet:
    """Parse a declaration dump file into a DeclarationSet."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeclarationError(f"Cannot read {file_path}: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeclarationError(f"{file_path} is not valid YAML/JSON: {e}") from e

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise DeclarationError(f"{file_path} must contain a mapping with 'classes' and 'types'")

    try:
        declarations = DeclarationSet(**doc)
    except ValidationError as e:
        raise DeclarationError(f"Invalid declarations in {file_path}:\n{e}") from e

    logger.debug(
        "Loaded %d classes and %d types from %s",
        len(declarations.classes),
        len(declarations.types),
        file_path,
    )
    return declarations
