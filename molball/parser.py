"""
Reader for the plain-text coordinate file format.

Each data line holds an element symbol followed by x, y and z:

    O 0.000 1.210 0.000

A file may start with a two-line header: a one-character atom-count
line followed by a free-text comment line. Both are skipped.
"""

import logging
import re

import numpy as np

from .elements import find_element_id
from .structures import Atom

logger = logging.getLogger(__name__)

ASCII_WHITESPACE = " \t\n\r\f\v"
split_fields = re.compile(f"[{ASCII_WHITESPACE}]+").split


class ParseError(ValueError):
    """A coordinate file line that cannot be turned into an atom."""

    reason = "invalid line"

    def __init__(self, lineno, line, reason=None):
        self.lineno = lineno
        self.line = line
        if reason is not None:
            self.reason = reason
        ValueError.__init__(self, f"{self.reason} (line {lineno}: {line!r})")


class FormatError(ParseError):
    reason = "invalid line length"


class UnknownElementError(ParseError):
    reason = "unknown element"


class NumberFormatError(ParseError):
    reason = "invalid coordinate"


def has_header(lines):
    return len(lines) > 0 and len(lines[0].strip(ASCII_WHITESPACE)) == 1


def parse_atom_line(line, lineno):
    tokens = [t for t in split_fields(line) if t]
    if len(tokens) != 4:
        raise FormatError(lineno, line)

    symbol = tokens[0]
    element_id = find_element_id(symbol)
    if element_id is None:
        raise UnknownElementError(lineno, line, f"unknown element {symbol!r}")

    coords = []
    for token in tokens[1:]:
        try:
            if not token.isascii() or "_" in token:
                raise ValueError(token)
            coords.append(float(token))
        except ValueError:
            raise NumberFormatError(lineno, line, f"invalid coordinate {token!r}") from None

    position = tuple(float(c) for c in np.array(coords, dtype=np.float32))
    return Atom(element_id, position)


def parse_xyz(text):
    """
    Parses the contents of a coordinate file into a list of Atoms,
    in file order. Raises a ParseError subclass on the first bad line.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip(ASCII_WHITESPACE):
        lines.pop()

    i_start = 2 if has_header(lines) else 0
    if i_start:
        logger.debug("Skipping header %r", lines[0].strip())

    atoms = []
    for i_line in range(i_start, len(lines)):
        atoms.append(parse_atom_line(lines[i_line], i_line + 1))
    return atoms


def load_xyz(fname):
    """Reads and parses a coordinate file. Missing files raise OSError."""
    logger.info("Loading %s...", fname)
    with open(fname, "r") as f:
        text = f.read()
    atoms = parse_xyz(text)
    logger.info("Read %d atoms", len(atoms))
    return atoms
