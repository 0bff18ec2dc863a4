"""
Módulo de configuración de la calculadora.
Contiene la clase de configuración y la preparación del logging.
"""

from .settings import CalculatorConfig
from .logging_setup import setup_logging

__all__ = ['CalculatorConfig', 'setup_logging']
