"""Asciidoc bibliography entry formatting."""
import json
from typing import List, Optional

from .models import Author, BibliographicRecord


def format_authors(authors: List[Author]) -> str:
    """Format author list as "Given Family and Given Family. ".

    An empty list gives an empty string, without the closing period.
    """
    if not authors:
        return ""
    return " and ".join(str(a) for a in authors) + ". "


def format_year(record: BibliographicRecord) -> str:
    """Render the issued year as " (YYYY).".

    Strings are used as they are; other values keep their JSON spelling,
    so a null year prints "null", not "None".
    """
    year = record.issued.year
    if not isinstance(year, str):
        year = json.dumps(year)
    return f" ({year})."


def asciidoc_entry(citekey: str, record: BibliographicRecord, index: Optional[int] = None) -> str:
    """
    Build one Asciidoc bibliography list item.

    Example:
        - [[[smith2020, smith2020]]] J Smith. "A Study" (2020). Journal X. DOI: 10.1/xyz.

    Args:
        citekey: Key used both as anchor id and as visible label
        record: Resolved metadata
        index: Position in the bibliography. Entries are not numbered,
            so it does not appear in the output.

    Returns:
        The entry text, without a trailing newline

    Raises:
        MissingIssuedDateError: If the record carries no year
    """
    result = f"- [[[{citekey}, {citekey}]]] "
    result += format_authors(record.authors)
    result += f"\"{record.title}\""
    result += format_year(record)

    if record.container_title:
        result += f" {record.container_title}."
    if record.doi:
        result += f" DOI: {record.doi}."

    return result
