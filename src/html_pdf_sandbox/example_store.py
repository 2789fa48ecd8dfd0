"""
Bundled example documents shown in the editor's picker.

The set of examples is fixed: each identifier in ``SAMPLE_NAMES`` maps to a
``samples/<identifier>.htm`` file shipped with the package. Examples are read
once at startup and never change afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

SAMPLES_DIR = Path(__file__).resolve().parent / "samples"
SAMPLE_SUFFIX = ".htm"

SAMPLE_NAMES = (
    "hello-world",
    "arabic-rtl",
    "cjk-text",
    "handwriting",
    "page-layout",
)


def example_filename(identifier: str) -> str:
    """
    Derive the picker key for a sample identifier.

    Example:
        >>> example_filename("hello-world")
        "hello-world.htm"
    """
    return f"{identifier}{SAMPLE_SUFFIX}"


def load_examples(names: Iterable[str] = SAMPLE_NAMES, root: Optional[Path] = None) -> Dict[str, str]:
    """
    Read every named sample into a filename -> content mapping.

    A sample that cannot be read is logged and left out; the remaining samples
    still load.

    Args:
        names: Sample identifiers to load
        root: Directory holding the sample files (default: the bundled samples)

    Returns:
        Mapping from derived filename to the sample's UTF-8 text
    """
    root = root or SAMPLES_DIR
    examples: Dict[str, str] = {}
    for name in names:
        filename = example_filename(name)
        try:
            examples[filename] = (root / filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Failed to load example {filename}: {exc}")
            continue
    logger.info(f"Loaded {len(examples)} example(s) from {root}")
    return examples
