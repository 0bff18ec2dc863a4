"""
Excepciones del núcleo de la calculadora.

El núcleo casi nunca falla: los casos degenerados (display no numérico,
'=' sin operación pendiente, división por cero) se resuelven como no-op o
como un valor numérico bien definido. Estas excepciones cubren solo los
errores de programación del llamador.
"""


class CalculatorError(Exception):
    """Error base de la calculadora."""


class UnknownTokenError(CalculatorError, ValueError):
    """
    El shell emitió un token que no corresponde a ninguna acción.

    Es una violación de contrato del llamador, no una condición recuperable.
    """

    def __init__(self, token):
        super().__init__(f"Token desconocido: {token!r}")
        self.token = token


class FormattingError(CalculatorError):
    """No se pudo convertir un valor a texto para el display."""
