"""Asciidoc bibliography builder backed by Zotero's Better BibTeX."""
from .api import BetterBibTeXAPI
from .bibliography import BibliographyBuilder, read_document
from .config import Config
from .extractor import extract_citekeys
from .formatting import asciidoc_entry
from .models import Author, BibliographicRecord, Issued

__version__ = "1.0.0"
__all__ = [
    "BetterBibTeXAPI",
    "BibliographyBuilder",
    "Config",
    "read_document",
    "extract_citekeys",
    "asciidoc_entry",
    "Author",
    "BibliographicRecord",
    "Issued",
]
