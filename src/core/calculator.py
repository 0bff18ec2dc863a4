"""
Calculadora dirigida por historial de pulsaciones.

Este módulo contiene la clase Calculator, dueña del historial de tokens.
Cada pulsación se añade al historial y el estado se vuelve a calcular
desde cero con replay().
"""

import logging

from config.settings import CalculatorConfig

from .actions import classify_token
from .replay import replay, trim_at_last_clear
from .state import INITIAL_STATE

logger = logging.getLogger("calculator")


# ============================================================================
# CLASE: Calculator
# Propósito: Historial de pulsaciones + estado derivado
# Responsabilidades:
#   - Clasificar cada token recibido del shell
#   - Añadir el token al historial (solo se añade, nunca se borra)
#   - Recalcular el estado plegando el reducer sobre todo el historial
#   - Exponer los dos textos del display (número y operador)
# ============================================================================
class Calculator:
    """
    Calculadora de cuatro operaciones con estado derivado del historial.

    Modelo de operación:
        1. El shell llama a press() con el token de la tecla pulsada
        2. El token se valida y se añade al historial
        3. El estado se recalcula con replay() sobre el historial completo
        4. El shell lee get_display() y get_operator() y los dibuja

    El estado nunca se modifica en sitio: 'state' es siempre el resultado
    de replay(history).
    """

    def __init__(self, config=None):
        """
        Inicializa calculadora con historial vacío.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self._history = ()
        self._state = INITIAL_STATE

    @property
    def history(self):
        """Historial completo de tokens aceptados (tupla, solo lectura)."""
        return self._history

    @property
    def state(self):
        """Estado actual, derivado del historial."""
        return self._state

    def press(self, token):
        """
        Procesa la pulsación de una tecla.

        Args:
            token (str): "0"-"9", "+", "-", "*", "/", "=" o el token de borrado

        Returns:
            CalculatorState: Estado tras la pulsación

        Raises:
            UnknownTokenError: Token desconocido con config.strict_tokens activo

        En modo no estricto un token desconocido se ignora: no entra en el
        historial y el estado no cambia.
        """
        action = classify_token(token, clear_token=self.config.clear_token,
                                strict=self.config.strict_tokens)
        if action is None:
            return self._state

        self._history = self._history + (token,)
        self._state = replay(
            self._replay_log(),
            clear_token=self.config.clear_token,
            strict=self.config.strict_tokens,
            max_fraction_digits=self.config.max_fraction_digits,
        )
        logger.debug("Tecla %r -> [%s] %s", token, self._state.display_operator,
                     self._state.display_number)
        return self._state

    def press_many(self, tokens):
        """Procesa varias pulsaciones en orden y devuelve el estado final."""
        for token in tokens:
            self.press(token)
        return self._state

    def _replay_log(self):
        # Lo anterior al último AC no afecta al resultado
        if self.config.truncate_log_on_clear:
            return trim_at_last_clear(self._history, self.config.clear_token)
        return self._history

    def get_display(self):
        """Texto del display principal."""
        return self._state.display_number

    def get_operator(self):
        """Texto del display secundario (operador pendiente o "")."""
        return self._state.display_operator
