"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase KeypadRenderer que dibuja el display y el
teclado de la calculadora sobre un frame de NumPy y traduce clics en tokens.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig


# Teclado 4x4 leído por filas; 'a' es la tecla de borrado (AC)
KEYPAD_LAYOUT = "789+456-123*a0=/"
KEYPAD_COLUMNS = 4

BUTTON_SIZE = 80
BUTTON_SPACING = 10

# Colores BGR
BACKGROUND_COLOR = (0, 0, 0)
DIGIT_COLOR = (51, 51, 51)          # Gris oscuro para dígitos
OPERATOR_COLOR = (0, 149, 255)      # Naranja para operadores y AC
LABEL_COLOR = (255, 255, 255)
OPERATOR_TEXT_COLOR = (128, 128, 128)


# ============================================================================
# CLASE: KeypadRenderer
# Propósito: Dibujar la calculadora y resolver qué tecla se pulsó
# Responsabilidades:
#   - Dibujar display secundario (operador) y principal (número)
#   - Dibujar el teclado 4x4 con botones circulares
#   - Traducir coordenadas de clic en el token de la tecla
# ============================================================================
class KeypadRenderer:
    """
    Renderizador del teclado y display de la calculadora.

    Componentes visuales:
        1. Display secundario: operador pendiente, gris, alineado a la derecha
        2. Display principal: número actual, blanco y grande, alineado a la derecha
        3. Teclado: 4 filas de 4 botones circulares (dígitos grises,
           operadores y AC naranjas)

    El renderer no conoce el estado de la calculadora: solo recibe los dos
    textos que debe mostrar.
    """

    def __init__(self, width=None, height=None, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width = width if width else self.config.window_width
        self.height = height if height else self.config.window_height
        self.margin = 30

        # Posiciones verticales de los dos displays (línea base del texto)
        self.operator_baseline = 120
        self.number_baseline = 260
        self.keypad_top = 320

        self._buttons = self._layout_buttons()

    def _layout_buttons(self):
        """
        Calcula la posición de cada botón.

        Returns:
            list: [(token, (cx, cy), radio)] en orden de lectura
        """
        grid_w = KEYPAD_COLUMNS * BUTTON_SIZE + (KEYPAD_COLUMNS - 1) * BUTTON_SPACING
        left = (self.width - grid_w) // 2
        radius = BUTTON_SIZE // 2

        buttons = []
        for index, char in enumerate(KEYPAD_LAYOUT):
            row, col = divmod(index, KEYPAD_COLUMNS)
            cx = left + col * (BUTTON_SIZE + BUTTON_SPACING) + radius
            cy = self.keypad_top + row * (BUTTON_SIZE + BUTTON_SPACING) + radius
            token = self.config.clear_token if char == "a" else char
            buttons.append((token, (cx, cy), radius))
        return buttons

    def buttons(self):
        """Lista de botones: [(token, centro, radio)]."""
        return list(self._buttons)

    def hit_test(self, x, y):
        """
        Devuelve el token de la tecla bajo el punto (x, y).

        Returns:
            str | None: Token de la tecla, o None si el punto cae fuera
        """
        for token, (cx, cy), radius in self._buttons:
            if (x - cx) ** 2 + (y - cy) ** 2 <= radius ** 2:
                return token
        return None

    def _fit_scale(self, text, font, scale, thickness, max_width):
        """Reduce la escala de la fuente hasta que el texto quepa en max_width."""
        while scale > 0.5:
            text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
            if text_w <= max_width:
                break
            scale -= 0.1
        return scale

    def _put_right_aligned(self, img, text, baseline, font, scale, color, thickness):
        max_width = self.width - 2 * self.margin
        scale = self._fit_scale(text, font, scale, thickness, max_width)
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        x = self.width - self.margin - text_w
        cv2.putText(img, text, (x, baseline), font, scale, color, thickness, cv2.LINE_AA)

    def draw_display(self, img, operator, number):
        """
        Dibuja los dos displays.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            operator (str): Operador pendiente ("" si no hay)
            number (str): Número del display principal
        """
        if operator:
            self._put_right_aligned(img, operator, self.operator_baseline,
                                    cv2.FONT_HERSHEY_SIMPLEX, 1.3, OPERATOR_TEXT_COLOR, 2)
        self._put_right_aligned(img, number, self.number_baseline,
                                cv2.FONT_HERSHEY_SIMPLEX, 2.6, LABEL_COLOR, 4)

    def draw_keypad(self, img):
        """Dibuja los 16 botones del teclado."""
        for token, (cx, cy), radius in self._buttons:
            color = DIGIT_COLOR if token.isdigit() else OPERATOR_COLOR
            cv2.circle(img, (cx, cy), radius, color, -1, cv2.LINE_AA)

            scale = 0.9 if len(token) > 1 else 1.2
            (text_w, text_h), _ = cv2.getTextSize(token, cv2.FONT_HERSHEY_DUPLEX, scale, 2)
            cv2.putText(img, token, (cx - text_w // 2, cy + text_h // 2),
                        cv2.FONT_HERSHEY_DUPLEX, scale, LABEL_COLOR, 2, cv2.LINE_AA)

    def render(self, operator, number):
        """
        Dibuja un frame completo.

        Returns:
            np.ndarray: Imagen BGR (height x width x 3) lista para cv2.imshow
        """
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = BACKGROUND_COLOR
        self.draw_display(img, operator, number)
        self.draw_keypad(img)
        return img
