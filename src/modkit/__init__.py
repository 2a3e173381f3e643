"""
ModKit — маленькие stateless-хелперы поверх стандартных значений.

Числа, строки, коллекции, optional-значения, диапазоны, 2D-геометрия,
цвета, шрифты, attributed-строки, даты и codable-обёртки.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"
