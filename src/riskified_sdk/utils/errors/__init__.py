"""Exceções utilitárias compartilhadas."""

from .exceptions import ConfigurationError, DecodeError, RiskifiedError

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "RiskifiedError",
]
