"""Find citekey markers in a document."""
import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# Asciidoc cross reference: <<citekey>>
MARKER_PATTERN = re.compile(r"<<.+?>>")


def find_markers(text: str) -> List[str]:
    """Return every <<...>> marker in the text, delimiters included, sorted."""
    return sorted(MARKER_PATTERN.findall(text))


def extract_citekeys(text: str) -> List[str]:
    """
    Extract citekeys from document text.

    Keys come back in lexicographic order of their markers, not in the
    order they appear in the document, so a bibliography built from them
    is reproducible. Repeated markers are kept.

    Args:
        text: Full document text

    Returns:
        List of citekeys with the angle brackets stripped
    """
    citekeys = [marker.strip("<>") for marker in find_markers(text)]
    logger.info(f"Found {len(citekeys)} citation markers")
    return citekeys
