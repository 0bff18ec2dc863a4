"""
Función de transición de la calculadora.

reduce(state, action) es pura: no hace I/O, no modifica su entrada y siempre
devuelve un estado. Junto a ella viven las dos funciones de las que depende:
apply_operation (aritmética binaria) y format_number (número -> texto).
"""

import math
import numbers

from .actions import Clear, Digit, Equals, Operation, OperatorAction
from .errors import FormattingError
from .state import INITIAL_STATE, PendingOperation

MAX_FRACTION_DIGITS = 8

# Textos fijos para valores no finitos. float() los vuelve a leer, así que el
# display sigue siendo un número válido y el infinito se propaga.
INFINITY_TEXT = "inf"
NEGATIVE_INFINITY_TEXT = "-inf"
NAN_TEXT = "nan"


def apply_operation(operation, first, second):
    """
    Aplica una operación binaria.

    Args:
        operation (Operation): Operación a aplicar
        first (float): Operando izquierdo
        second (float): Operando derecho

    Returns:
        float: Resultado. Dividir entre cero da +infinito (no es un error).
        Una operación fuera del conjunto cerrado devuelve 'second'.
    """
    if operation is Operation.ADD:
        return first + second
    if operation is Operation.SUBTRACT:
        return first - second
    if operation is Operation.MULTIPLY:
        return first * second
    if operation is Operation.DIVIDE:
        return first / second if second != 0 else math.inf
    return second


def format_number(value, max_fraction_digits=MAX_FRACTION_DIGITS):
    """
    Convierte un resultado en el texto del display.

    Formateo:
        - 10.0 -> "10" (sin ceros finales ni punto suelto)
        - 1/3 -> "0.33333333" (máximo 8 decimales, redondeado)
        - -0.0 -> "0"
        - infinito -> "inf" / "-inf", NaN -> "nan"

    Raises:
        FormattingError: Si el valor no es numérico
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise FormattingError(f"No se puede formatear {value!r}")

    value = float(value)
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT

    text = f"{value:.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _parse_display(text):
    try:
        return float(text)
    except ValueError:
        return None


# ============================================================================
# REDUCER
# ============================================================================
def reduce(state, action, max_fraction_digits=MAX_FRACTION_DIGITS):
    """
    Calcula el siguiente estado a partir del actual y una acción.

    Args:
        state (CalculatorState): Estado actual (no se modifica)
        action (Action): Acción del usuario
        max_fraction_digits (int): Tope de decimales del display

    Returns:
        CalculatorState: Nuevo estado (o el mismo si la acción es un no-op)

    Reglas:
        - Digit: Sobrescribe el display si hay que resetearlo o si muestra
          "0"; si no, concatena el dígito como texto
        - Operator: Si ya había operación pendiente la evalúa primero
          (encadenamiento: 5 + 3 + -> muestra 8) y guarda el resultado
          como nuevo operando izquierdo
        - Equals: Evalúa la operación pendiente; sin ella es un no-op
        - Clear: Estado inicial
    """
    if isinstance(action, Digit):
        if state.should_reset_display or state.display_number == "0":
            display = action.token
        else:
            display = state.display_number + action.token
        return state.evolve(display_number=display, should_reset_display=False)

    if isinstance(action, OperatorAction):
        current = _parse_display(state.display_number)
        if current is None:
            return state

        if state.pending is not None:
            # Encadenamiento: resolver la operación anterior antes de seguir
            result = apply_operation(state.pending.operation, state.pending.stored_number, current)
            return state.evolve(
                display_number=format_number(result, max_fraction_digits),
                display_operator="",
                pending=PendingOperation(result, action.operation),
                should_reset_display=True,
            )

        return state.evolve(
            display_operator=action.operation.symbol,
            pending=PendingOperation(current, action.operation),
            should_reset_display=True,
        )

    if isinstance(action, Equals):
        current = _parse_display(state.display_number)
        if current is None or state.pending is None:
            return state

        result = apply_operation(state.pending.operation, state.pending.stored_number, current)
        return state.evolve(
            display_number=format_number(result, max_fraction_digits),
            display_operator="",
            pending=None,
            should_reset_display=True,
        )

    if isinstance(action, Clear):
        return INITIAL_STATE

    raise TypeError(f"Acción no soportada: {action!r}")
