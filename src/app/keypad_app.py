"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase KeypadCalculatorApp.
"""

import logging

import cv2

from config.settings import CalculatorConfig
from core.calculator import Calculator
from ui.renderer import KeypadRenderer

logger = logging.getLogger("calculator")

KEY_ESC = 27
KEY_ENTER = (10, 13)


# ============================================================================
class KeypadCalculatorApp:
    """
    Aplicación principal de la calculadora con teclado en pantalla.

    Arquitectura:
        - Calculator: Historial de pulsaciones y estado derivado
        - KeypadRenderer: Dibujo del display y del teclado
        - KeypadCalculatorApp: Ventana OpenCV, ratón/teclado y loop principal

    Cada clic o tecla se convierte en un token, se pasa a Calculator.press()
    y el frame se vuelve a dibujar con los dos textos del estado resultante.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.calc = Calculator(self.config)
        self.ui = KeypadRenderer(config=self.config)
        self.running = False

        # Teclas físicas -> tokens
        self.key_tokens = {ord(c): c for c in "0123456789+-*/="}
        for code in KEY_ENTER:
            self.key_tokens[code] = "="
        self.key_tokens[ord('c')] = self.config.clear_token

    def handle_click(self, x, y):
        """
        Procesa un clic en la ventana.

        Returns:
            str | None: Token pulsado, o None si el clic no cae en un botón
        """
        token = self.ui.hit_test(x, y)
        if token is not None:
            self.calc.press(token)
        return token

    def handle_key(self, key):
        """
        Procesa una tecla física.

        Args:
            key (int): Código devuelto por cv2.waitKey (ya enmascarado con 0xFF)

        Returns:
            bool: False si la tecla pide salir (ESC o 'q'), True en otro caso
        """
        if key == KEY_ESC or key == ord('q'):
            return False
        token = self.key_tokens.get(key)
        if token is not None:
            self.calc.press(token)
        return True

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONUP:
            self.handle_click(x, y)

    def frame(self):
        """Dibuja el frame correspondiente al estado actual."""
        return self.ui.render(self.calc.get_operator(), self.calc.get_display())

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar el frame con el estado actual
            2. Mostrarlo y esperar teclas (los clics llegan por callback)
            3. Repetir hasta ESC, 'q' o cierre de la ventana

        Controles de teclado:
            - 0-9, + - * /: Teclas de la calculadora
            - = o Enter: Calcular
            - c: Borrar todo (AC)
            - ESC o 'q': Salir de la aplicación
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nClic en los botones o usa el teclado")
        print("Enter: =  |  c: AC  |  ESC o 'q': salir\n")

        title = self.config.window_title
        cv2.namedWindow(title)
        cv2.setMouseCallback(title, self._on_mouse)
        self.running = True

        while self.running:
            cv2.imshow(title, self.frame())

            key = cv2.waitKey(30) & 0xFF
            if key != 0xFF:
                self.running = self.handle_key(key)

            # Ventana cerrada con el botón de la barra de título
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                self.running = False

        cv2.destroyAllWindows()
        logger.info("Historial final: %d pulsaciones", len(self.calc.history))
        print("\nOK Aplicacion cerrada correctamente")
