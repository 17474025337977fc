"""
Core Module

Shared logging utilities.
"""

from zuora_soap.core.logger import ContextLogger, get_client_logger, get_logger

__all__ = [
    "ContextLogger",
    "get_client_logger",
    "get_logger",
]
