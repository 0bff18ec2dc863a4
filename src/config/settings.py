"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada del núcleo (token de
borrado, decimales, modo estricto) y de la ventana del teclado.
"""

import os


_TRUE_VALUES = ("1", "true", "yes", "on")


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración del núcleo y de la interfaz
# Responsabilidades:
#   - Definir cómo se interpretan los tokens del shell
#   - Definir el formato del display
#   - Configurar ventana y nivel de log
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Opciones disponibles:
        - Token de borrado y modo estricto para tokens desconocidos
        - Tope de decimales en el display
        - Recorte opcional del historial en el último AC
        - Tamaño y título de la ventana, nivel de log
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # NÚCLEO
        # ====================================================================
        self.clear_token = "AC"                     # Token del botón AC
        self.max_fraction_digits = 8                # Decimales máximos en display
        self.strict_tokens = False                  # True: token desconocido -> excepción
        self.truncate_log_on_clear = False          # Recortar historial en el último AC

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_width = 400
        self.window_height = 700
        self.window_title = "Calculadora"

        # ====================================================================
        # LOG
        # ====================================================================
        self.log_level = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        """
        Crea la configuración aplicando variables de entorno.

        Variables:
            - CALC_LOG_LEVEL: Nivel de log (DEBUG, INFO, ...)
            - CALC_STRICT_TOKENS: "1"/"true" activa el modo estricto
            - CALC_TRUNCATE_LOG: "1"/"true" recorta el historial en el último AC
        """
        environ = os.environ if environ is None else environ
        config = cls()
        config.log_level = environ.get("CALC_LOG_LEVEL", config.log_level).upper()
        if "CALC_STRICT_TOKENS" in environ:
            config.strict_tokens = environ["CALC_STRICT_TOKENS"].lower() in _TRUE_VALUES
        if "CALC_TRUNCATE_LOG" in environ:
            config.truncate_log_on_clear = environ["CALC_TRUNCATE_LOG"].lower() in _TRUE_VALUES
        return config
