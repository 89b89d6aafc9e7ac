"""JSON-RPC client for the Better BibTeX metadata service."""
import logging
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_RPC_URL
from .errors import (
    CitekeyNotFoundError,
    ResponseDecodeError,
    ResponseReadError,
    ServiceConnectionError,
    ServiceError,
)
from .models import BibliographicRecord
from .utils.logging_setup import log_api_call

logger = logging.getLogger(__name__)


class BaseAPI:
    """Base class for JSON-RPC clients.

    One session is kept for the lifetime of the client and reused by
    every call. Calls are made one after another, never concurrently.
    """
    def __init__(self, url: str, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _call(self, method: str, params: List[Any]) -> Any:
        """Send a JSON-RPC 2.0 request and return the reply's result member."""
        payload = {"jsonrpc": "2.0", "method": method, "params": params}
        log_api_call(type(self).__name__, method, params)

        try:
            response = self.session.post(self.url, json=payload)
        except (requests.exceptions.ChunkedEncodingError,
                requests.exceptions.ContentDecodingError) as e:
            raise ResponseReadError(f"Could not read reply from {self.url}: {e}") from e
        except requests.RequestException as e:
            raise ServiceConnectionError(f"Could not connect to {self.url}: {e}") from e

        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Any:
        try:
            reply = response.json()
        except ValueError as e:
            text = response.text[:200]
            logger.debug(f"Undecodable reply (Status: {response.status_code}): {text}")
            raise ResponseDecodeError(f"{self.url} returned invalid JSON", text) from e

        if not isinstance(reply, dict):
            raise ResponseDecodeError(
                f"{self.url} returned {type(reply).__name__}, expected an object", response.text[:200])

        error = reply.get("error")
        if error:
            if isinstance(error, dict):
                raise ServiceError(str(error.get("message", error)), error.get("code"))
            raise ServiceError(str(error))

        return reply.get("result")


class BetterBibTeXAPI(BaseAPI):
    """Client for the Better BibTeX for Zotero JSON-RPC endpoint."""
    SEARCH_METHOD = "item.search"

    def __init__(self, url: str = DEFAULT_RPC_URL, session: Optional[requests.Session] = None):
        super().__init__(url, session)

    def search(self, citekey: str) -> List[Dict[str, Any]]:
        """Run an item search and return the raw candidate list."""
        result = self._call(self.SEARCH_METHOD, [citekey])
        if result is None:
            return []
        if not isinstance(result, list):
            raise ResponseDecodeError(f"Field 'result' should be an array, got {type(result).__name__}")
        return result

    def lookup(self, citekey: str) -> BibliographicRecord:
        """
        Resolve a citekey to its first matching record.

        Raises:
            ServiceConnectionError: If the service cannot be reached
            ResponseReadError: If the reply body cannot be read
            ResponseDecodeError: If the reply is not the expected JSON
            ServiceError: If the service reports a JSON-RPC error
            CitekeyNotFoundError: If the search returns no candidates
        """
        items = self.search(citekey)
        if not items:
            raise CitekeyNotFoundError(citekey)

        logger.debug(f"{len(items)} candidate(s) for {citekey}, using the first")
        return BibliographicRecord.from_dict(items[0])

    def close(self) -> None:
        self.session.close()
