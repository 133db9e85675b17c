"""
Fixed element table and display colours.

Atoms refer to elements by their index into ELEMENTS. Colours are packed
0xRRGGBBAA integers; unpack_color turns them into the float RGBA tuples
that vispy expects.
"""

from collections import namedtuple

Element = namedtuple("Element", ["symbol", "color", "radius"])


ELEMENTS = (
    Element("H", 0xFFFFFFFF, 0.31),
    Element("He", 0xD9FFFFFF, 0.28),
    Element("Li", 0xCC80FFFF, 0.64),
    Element("B", 0xFFB5B5FF, 0.42),
    Element("C", 0x909090FF, 0.38),
    Element("N", 0x3050F8FF, 0.36),
    Element("O", 0xFF0D0DFF, 0.33),
    Element("F", 0x90E050FF, 0.29),
    Element("Na", 0xAB5CF2FF, 0.83),
    Element("Mg", 0x8AFF00FF, 0.70),
    Element("Si", 0xF0C8A0FF, 0.56),
    Element("P", 0xFF8000FF, 0.54),
    Element("S", 0xFFFF30FF, 0.53),
    Element("Cl", 0x1FF01FFF, 0.51),
    Element("K", 0x8F40D4FF, 1.02),
    Element("Ca", 0x3DFF00FF, 0.88),
    Element("Fe", 0xE06633FF, 0.66),
    Element("Cu", 0xC88033FF, 0.66),
    Element("Zn", 0x7D80B0FF, 0.61),
    Element("Br", 0xA62929FF, 0.60),
    Element("I", 0x940094FF, 0.70),
)

BACKGROUND_COLOR = 0x181818AA
BOND_COLOR = 0xC8C8C8FF
BOND_RADIUS = 0.1


def find_element_id(symbol):
    """Index of the first element whose symbol equals `symbol`, or None."""
    for element_id, element in enumerate(ELEMENTS):
        if element.symbol == symbol:
            return element_id
    return None


def get_element(element_id):
    if not 0 <= element_id < len(ELEMENTS):
        raise IndexError(f"Element id {element_id} is not in the element table")
    return ELEMENTS[element_id]


def unpack_color(color):
    """
    Splits a packed 0xRRGGBBAA colour into an (r, g, b, a) tuple of
    floats in [0, 1].
    """
    return tuple(((color >> shift) & 0xFF) / 255.0 for shift in (24, 16, 8, 0))
