"""Data models for bibliographic records returned by the metadata service."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .errors import MissingIssuedDateError, ResponseDecodeError

# Date parts arrive loosely typed: years are usually numbers, sometimes strings
DatePart = Union[int, float, str, bool, None]


def _string(data: Dict[str, Any], key: str) -> str:
    """Fetch an optional string member, treating absent or null as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ResponseDecodeError(f"Field '{key}' should be a string, got {type(value).__name__}")
    return value


@dataclass
class Author:
    """Author information."""
    family: str = ""
    given: str = ""

    def __str__(self):
        return f"{self.given} {self.family}"

    @classmethod
    def from_dict(cls, data: Any) -> 'Author':
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"Author should be an object, got {type(data).__name__}")
        return cls(family=_string(data, "family"), given=_string(data, "given"))


@dataclass
class Issued:
    """Issued date as CSL date-parts, e.g. [[2020, 3, 1]]."""
    date_parts: List[List[DatePart]] = field(default_factory=list)

    @property
    def year(self) -> DatePart:
        """First element of the first date-part group, untouched."""
        try:
            return self.date_parts[0][0]
        except IndexError:
            raise MissingIssuedDateError(
                f"Issued date has no year (date-parts: {self.date_parts!r})")

    @classmethod
    def from_dict(cls, data: Any) -> 'Issued':
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"Field 'issued' should be an object, got {type(data).__name__}")
        parts = data.get("date-parts")
        if parts is None:
            return cls()
        if not isinstance(parts, list) or not all(p is None or isinstance(p, list) for p in parts):
            raise ResponseDecodeError("Field 'date-parts' should be an array of arrays")
        # A null group reads as an empty one
        return cls(date_parts=[list(p) if p is not None else [] for p in parts])


@dataclass
class BibliographicRecord:
    """Resolved metadata for one citekey."""
    title: str = ""
    page: str = ""
    container_title: str = ""
    authors: List[Author] = field(default_factory=list)
    issued: Issued = field(default_factory=Issued)
    doi: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> 'BibliographicRecord':
        """Create a record from one element of the service's result list."""
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"Result item should be an object, got {type(data).__name__}")

        raw_authors = data.get("author")
        if raw_authors is None:
            raw_authors = []
        if not isinstance(raw_authors, list):
            raise ResponseDecodeError("Field 'author' should be an array")

        return cls(
            title=_string(data, "title"),
            page=_string(data, "page"),
            container_title=_string(data, "container-title"),
            authors=[Author.from_dict(a) for a in raw_authors],
            issued=Issued.from_dict(data.get("issued")),
            doi=_string(data, "DOI"),
        )
