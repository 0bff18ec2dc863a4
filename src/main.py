# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
from app.keypad_app import KeypadCalculatorApp
from config.logging_setup import setup_logging
from config.settings import CalculatorConfig


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python3 src/main.py
        calculadora            (instalado con pip)

    Variables de entorno:
        - CALC_LOG_LEVEL, CALC_STRICT_TOKENS, CALC_TRUNCATE_LOG
    """
    config = CalculatorConfig.from_env()
    setup_logging(config.log_level)
    try:
        app = KeypadCalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
    except Exception as e:
        # Error inesperado - mostrar información completa
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
