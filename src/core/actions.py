"""
Vocabulario cerrado de acciones del usuario.

Cada pulsación del shell llega como un token de texto ("7", "+", "=", "AC")
y se clasifica en exactamente una de las acciones de este módulo.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import UnknownTokenError

logger = logging.getLogger("calculator")

DEFAULT_CLEAR_TOKEN = "AC"
EQUALS_TOKEN = "="
DIGITS = "0123456789"


class Operation(Enum):
    """Las cuatro operaciones binarias. El valor es el token que emite el shell."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self):
        return self.value

    @classmethod
    def from_token(cls, token):
        """Devuelve la operación de un token ("+", "×", ...) o None si no lo es."""
        token = _OPERATOR_ALIASES.get(token, token)
        try:
            return cls(token)
        except ValueError:
            return None


# Símbolos tipográficos que algunos teclados muestran en lugar de los ASCII
_OPERATOR_ALIASES = {
    "−": "-",
    "×": "*",
    "÷": "/",
}


# ============================================================================
# ACCIONES
# ============================================================================
@dataclass(frozen=True)
class Digit:
    """Dígito "0"-"9" pulsado."""

    token: str


@dataclass(frozen=True)
class OperatorAction:
    """Operador pulsado."""

    operation: Operation


@dataclass(frozen=True)
class Equals:
    """Botón '='."""


@dataclass(frozen=True)
class Clear:
    """Botón AC: vuelve al estado inicial."""


Action = Union[Digit, OperatorAction, Equals, Clear]


def classify_token(token, clear_token=DEFAULT_CLEAR_TOKEN, strict=True):
    """
    Clasifica un token crudo del shell en una acción.

    Args:
        token (str): Token emitido por el shell
        clear_token (str): Token que representa AC
        strict (bool): Si es True, un token desconocido lanza excepción;
            si es False, se registra un warning y se devuelve None

    Returns:
        Action | None: Acción correspondiente, o None si se ignora

    Raises:
        UnknownTokenError: Token desconocido en modo estricto

    Orden de clasificación:
        1. Operador (+, -, *, / y sus alias ×, ÷, −)
        2. Token de borrado
        3. '='
        4. Dígito
    """
    operation = Operation.from_token(token)
    if operation is not None:
        return OperatorAction(operation)
    if token == clear_token:
        return Clear()
    if token == EQUALS_TOKEN:
        return Equals()
    if isinstance(token, str) and len(token) == 1 and token in DIGITS:
        return Digit(token)

    if strict:
        raise UnknownTokenError(token)
    logger.warning("Token ignorado: %r", token)
    return None
