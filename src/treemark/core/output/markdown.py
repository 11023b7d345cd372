from __future__ import annotations

"""
Markdown Document Output.

Wraps a rendered structure in the project documentation template and
persists it for the host. The template is fixed: heading, one intro
sentence, and a single fenced code block holding the full structure.
"""

import logging
import os
from typing import Optional

from treemark.domain.constants import (
    MARKDOWN_EXTENSION,
    MARKDOWN_FENCE,
    MARKDOWN_HEADING,
    MARKDOWN_INTRO,
)
from treemark.domain.structure_models import PreconditionError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DOCUMENT RENDERING
# -----------------------------------------------------------------------------

def render_as_markdown(root_folder_name: Optional[str], full_text: Optional[str]) -> str:
    """
    Embed the full structure text in the Markdown document template.

    Args:
        root_folder_name: Root name of the run that produced `full_text`.
        full_text: Untruncated structure rendering.

    Returns:
        str: The Markdown document (no trailing newline).

    Raises:
        PreconditionError: If either argument is missing or empty, i.e. no
                           structure has been generated yet.
    """
    if not full_text or not root_folder_name:
        raise PreconditionError("Missing structure or folder name.")

    return (
        f"{MARKDOWN_HEADING}\n\n"
        f"{MARKDOWN_INTRO}\n\n"
        f"{MARKDOWN_FENCE}\n"
        f"{full_text}\n"
        f"{MARKDOWN_FENCE}"
    )


def markdown_file_name(root_folder_name: str) -> str:
    """Name of the generated document: `<root folder name>.md`."""
    return f"{root_folder_name}{MARKDOWN_EXTENSION}"

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def save_markdown(save_path: str, content: str) -> str:
    """
    Write the document as UTF-8, creating parent directories.

    Args:
        save_path: Target file path.
        content: Markdown text.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    abs_path = os.path.abspath(save_path)
    try:
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        with open(abs_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to save document to '{abs_path}': {e}")
        raise

    logger.info(f"Document saved to file: {abs_path}")
    return abs_path
