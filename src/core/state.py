"""
Estado inmutable de la calculadora.

Este módulo contiene CalculatorState, la instantánea completa que el reducer
recibe y devuelve, y PendingOperation, el par (operando izquierdo, operador)
que espera al segundo operando.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .actions import Operation


# ============================================================================
# CLASE: PendingOperation
# Propósito: Operando izquierdo + operador a la espera del segundo operando
# ============================================================================
@dataclass(frozen=True)
class PendingOperation:
    """Número almacenado y operación que se aplicará con el siguiente operando."""

    stored_number: float
    operation: Operation


# ============================================================================
# CLASE: CalculatorState
# Propósito: Instantánea inmutable de todo el estado de la calculadora
# Responsabilidades:
#   - Guardar lo que se muestra (número y operador)
#   - Guardar la operación pendiente como un único opcional
#   - Indicar si el próximo dígito empieza un número nuevo
# ============================================================================
@dataclass(frozen=True)
class CalculatorState:
    """
    Estado de la calculadora. Nunca se modifica: cada transición crea otro.

    Campos:
        - display_number: Texto del display principal ("0" al inicio)
        - display_operator: Operador pendiente en el display secundario ("" si no hay)
        - pending: Operación pendiente o None. stored_number y operation
          van siempre juntos, nunca uno sin el otro
        - should_reset_display: El próximo dígito sobrescribe el display
    """

    display_number: str = "0"
    display_operator: str = ""
    pending: Optional[PendingOperation] = None
    should_reset_display: bool = False

    @property
    def stored_number(self):
        """Operando izquierdo almacenado, o None."""
        return self.pending.stored_number if self.pending else None

    @property
    def operation(self):
        """Operación pendiente, o None."""
        return self.pending.operation if self.pending else None

    def evolve(self, **changes):
        """Devuelve una copia con los campos indicados cambiados."""
        return replace(self, **changes)


INITIAL_STATE = CalculatorState()
