"""
Configuration Module

Zuora client configuration settings.
"""

from zuora_soap.config.settings import ZuoraSettings, get_settings

__all__ = [
    "ZuoraSettings",
    "get_settings",
]
