"""
Reconstrucción del estado a partir del historial de tokens.

El estado mostrado nunca se arrastra de una pulsación a otra: se recalcula
plegando reduce() sobre TODO el historial desde el estado inicial. Mismo
historial, mismo estado.
"""

import logging
from functools import reduce as fold

from .actions import DEFAULT_CLEAR_TOKEN, classify_token
from .reducer import MAX_FRACTION_DIGITS, reduce
from .state import INITIAL_STATE

logger = logging.getLogger("calculator")


def replay_actions(actions, max_fraction_digits=MAX_FRACTION_DIGITS):
    """Pliega reduce() sobre acciones ya clasificadas, desde el estado inicial."""
    return fold(
        lambda state, action: reduce(state, action, max_fraction_digits),
        actions,
        INITIAL_STATE,
    )


def replay(tokens, clear_token=DEFAULT_CLEAR_TOKEN, strict=True,
           max_fraction_digits=MAX_FRACTION_DIGITS):
    """
    Recalcula el estado desde cero a partir de los tokens crudos.

    Args:
        tokens (Iterable[str]): Historial completo de pulsaciones
        clear_token (str): Token que representa AC
        strict (bool): Token desconocido -> excepción (True) o se ignora (False)
        max_fraction_digits (int): Tope de decimales del display

    Returns:
        CalculatorState: Estado resultante

    Raises:
        UnknownTokenError: Token desconocido en modo estricto
    """
    tokens = list(tokens)
    actions = []
    for token in tokens:
        action = classify_token(token, clear_token=clear_token, strict=strict)
        if action is not None:
            actions.append(action)

    state = replay_actions(actions, max_fraction_digits)
    logger.debug("Replay de %d tokens -> %r", len(tokens), state.display_number)
    return state


def trim_at_last_clear(tokens, clear_token=DEFAULT_CLEAR_TOKEN):
    """
    Descarta todo lo anterior al último AC (incluido el propio AC).

    Clear devuelve siempre el estado inicial, así que lo que hay antes del
    último AC no influye en el resultado: replay(trim_at_last_clear(log))
    es igual a replay(log).
    """
    tokens = tuple(tokens)
    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index] == clear_token:
            return tokens[index + 1:]
    return tokens
