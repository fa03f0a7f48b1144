"""Observability – structured logging helpers."""
from flagmask.observability.logging.factory import JsonLoggerFactory
from flagmask.observability.logging.processors import ErrorDetailProcessor, get_logger

__all__ = ["ErrorDetailProcessor", "JsonLoggerFactory", "get_logger"]
