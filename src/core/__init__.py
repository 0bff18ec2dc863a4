"""
Módulo core con la lógica principal de la calculadora.
Contiene el modelo de estado y acciones, el reducer y el replay del historial.
"""

from .errors import CalculatorError, FormattingError, UnknownTokenError
from .actions import Action, Clear, Digit, Equals, Operation, OperatorAction, classify_token
from .state import INITIAL_STATE, CalculatorState, PendingOperation
from .reducer import apply_operation, format_number, reduce
from .replay import replay, replay_actions, trim_at_last_clear
from .calculator import Calculator

__all__ = [
    'Action', 'Calculator', 'CalculatorError', 'CalculatorState', 'Clear',
    'Digit', 'Equals', 'FormattingError', 'INITIAL_STATE', 'Operation',
    'OperatorAction', 'PendingOperation', 'UnknownTokenError', 'apply_operation',
    'classify_token', 'format_number', 'reduce', 'replay', 'replay_actions',
    'trim_at_last_clear',
]
