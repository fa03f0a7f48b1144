"""Observability – structured logging for flagmask and its host programs."""
from flagmask.observability.logging import ErrorDetailProcessor, JsonLoggerFactory, get_logger

__all__ = ["ErrorDetailProcessor", "JsonLoggerFactory", "get_logger"]
