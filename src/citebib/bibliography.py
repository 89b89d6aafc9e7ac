"""
Bibliography builder - ties extraction, lookup and formatting together.
"""
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO, Tuple

from .api import BetterBibTeXAPI
from .config import Config
from .errors import DocumentReadError
from .extractor import extract_citekeys
from .formatting import asciidoc_entry

logger = logging.getLogger(__name__)


def read_document(path: str) -> str:
    """Read the whole document into memory."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e


class BibliographyBuilder:
    """Resolve every citekey in a document and emit its bibliography.

    Keys are processed in sorted marker order. The first failure stops the
    run; entries already written stay written.
    """
    def __init__(self, config: Optional[Config] = None, api: Optional[BetterBibTeXAPI] = None):
        self.config = config or Config()
        self.api = api or BetterBibTeXAPI(self.config.RPC_URL)

    def entries(self, text: str) -> Iterator[Tuple[str, str]]:
        """Yield (citekey, entry) pairs, looking each key up as it is reached."""
        for i, citekey in enumerate(extract_citekeys(text)):
            logger.debug(f"Resolving {citekey}")
            record = self.api.lookup(citekey)
            yield citekey, asciidoc_entry(citekey, record, i)

    def write(self, text: str, out: Optional[TextIO] = None) -> int:
        """Write each entry followed by a blank line. Returns the entry count."""
        if out is None:
            out = sys.stdout
        count = 0
        for citekey, entry in self.entries(text):
            out.write(f"{entry}\n\n")
            out.flush()
            logger.debug(f"Wrote entry for {citekey}")
            count += 1
        return count

    def run(self, out: Optional[TextIO] = None) -> int:
        """Build the bibliography for the configured document."""
        text = read_document(self.config.DOCUMENT_PATH)
        count = self.write(text, out)
        logger.info(f"Wrote {count} bibliography entries from {self.config.DOCUMENT_PATH}")
        return count
