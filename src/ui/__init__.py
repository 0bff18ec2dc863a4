"""
Módulo de interfaz de usuario.
Contiene el renderizador del display y del teclado.
"""

from .renderer import KeypadRenderer, KEYPAD_LAYOUT

__all__ = ['KeypadRenderer', 'KEYPAD_LAYOUT']
