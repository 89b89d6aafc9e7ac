"""Configuration settings."""
import os
from dataclasses import dataclass, field
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Better BibTeX for Zotero listens here while Zotero is running
DEFAULT_RPC_URL: Final[str] = "http://localhost:23119/better-bibtex/json-rpc"
DEFAULT_DOCUMENT: Final[str] = "README.asc"


@dataclass
class Config:
    """Configuration settings for a bibliography run.

    Values are read from the environment when the instance is created,
    so each run (and each test) sees the current environment.
    """

    # Source document
    DOCUMENT_PATH: str = field(
        default_factory=lambda: os.getenv("CITEBIB_DOCUMENT", DEFAULT_DOCUMENT))

    # Metadata service
    RPC_URL: str = field(
        default_factory=lambda: os.getenv("CITEBIB_RPC_URL", DEFAULT_RPC_URL))

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))
    LOG_DIR: str = field(default_factory=lambda: os.getenv("CITEBIB_LOG_DIR", ""))
