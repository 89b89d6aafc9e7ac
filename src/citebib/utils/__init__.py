"""Utility helpers."""
from .logging_setup import setup_logging, log_api_call

__all__ = ["setup_logging", "log_api_call"]
