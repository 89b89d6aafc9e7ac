"""Exceptions raised while building a bibliography."""
from typing import Optional


class BibliographyError(Exception):
    """Base exception for every failure that aborts a run."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DocumentReadError(BibliographyError):
    """The source document could not be read."""
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not read document {path}: {reason}")


class ServiceConnectionError(BibliographyError, ConnectionError):
    """The metadata service could not be reached."""


class ResponseReadError(BibliographyError, IOError):
    """The reply body could not be read off the connection."""


class ResponseDecodeError(BibliographyError, ValueError):
    """The reply is not JSON of the expected shape."""
    def __init__(self, message: str, response_text: Optional[str] = None):
        self.response_text = response_text
        super().__init__(message)


class ServiceError(BibliographyError):
    """The service answered with a JSON-RPC error object."""
    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.message} (Code: {self.code})"
        return self.message


class CitekeyNotFoundError(BibliographyError):
    """The service returned no candidates for a citekey."""
    def __init__(self, citekey: str):
        self.citekey = citekey
        super().__init__(f"There were no results to the query for citekey '{citekey}'")


class MissingIssuedDateError(BibliographyError, IndexError):
    """The record has no year in its issued date-parts."""
