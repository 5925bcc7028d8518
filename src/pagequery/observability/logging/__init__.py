"""Observability – structured logging ports and helpers."""
from pagequery.observability.logging.protocol import Logger
from pagequery.observability.logging.factory import JsonLoggerFactory
from pagequery.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
