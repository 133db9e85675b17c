"""
molball: a minimal interactive ball-and-stick molecule viewer.

Reads a coordinate file, infers bonds from interatomic distances and
draws atoms as spheres and bonds as cylinders in a vispy window.

Main classes:
- Molecule: atoms and inferred bonds
- CameraPose, CameraController: the view and how it moves each frame
- MolecularViewerWindow (molball.viewer): the window

Usage:
    from molball import Molecule, load_xyz

    molecule = Molecule(load_xyz("water.xyz"))
"""

from .camera import CameraController, CameraPose
from .elements import ELEMENTS, Element
from .parser import FormatError, NumberFormatError, ParseError, UnknownElementError, load_xyz, parse_xyz
from .structures import Atom, Bond, Molecule, find_bonds

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Bond",
    "Molecule",
    "find_bonds",
    "Element",
    "ELEMENTS",
    "load_xyz",
    "parse_xyz",
    "ParseError",
    "FormatError",
    "UnknownElementError",
    "NumberFormatError",
    "CameraPose",
    "CameraController",
]
