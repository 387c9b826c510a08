"""Exceções base do SDK Riskified."""

from __future__ import annotations


class RiskifiedError(Exception):
    """Base para todas as falhas levantadas pelo SDK."""


class ConfigurationError(RiskifiedError):
    """Configuração do cliente inválida ou incompleta."""


class DecodeError(RiskifiedError, ValueError):
    """Corpo JSON inválido ou fora do formato esperado."""
