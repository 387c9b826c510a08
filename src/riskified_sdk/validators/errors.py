"""Erros de validação de campos."""

from __future__ import annotations

from dataclasses import dataclass

from riskified_sdk.utils.errors import RiskifiedError


@dataclass(frozen=True, slots=True)
class FieldError:
    """Campo inválido e o motivo."""

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class FieldBadFormatError(RiskifiedError, ValueError):
    """Um ou mais campos falharam na validação (nunca retentável)."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"Field(s) bad format: {details}")

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


ValidationError = FieldBadFormatError
