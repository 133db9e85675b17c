"""
Data structures for molecule visualization.

Contains the records built from a coordinate file:
- Atom: element id and position
- Bond: pair of atom indices
- Molecule: atoms plus the bonds inferred from their distances
"""

import logging
import math
from collections import namedtuple

import numpy as np

from .elements import get_element
from .spacehash import SpaceHash

logger = logging.getLogger(__name__)

BOND_CUTOFF = 3.0

# above this many atoms, bonds are found through the space hash
N_ATOM_HASHED = 200

Atom = namedtuple("Atom", ["element_id", "position"])

Bond = namedtuple("Bond", ["atom1_idx", "atom2_idx"])


def pos_distance(p1, p2):
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    dz = p1[2] - p2[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def find_bonds(atoms, cutoff=BOND_CUTOFF):
    """
    Checks every pair of atoms (i < j) and returns a Bond for each pair
    closer than cutoff, ordered by i then j.

    The cutoff is the same for every element pair.
    """
    bonds = []
    n_atom = len(atoms)
    for i in range(n_atom):
        for j in range(i + 1, n_atom):
            if pos_distance(atoms[i].position, atoms[j].position) < cutoff:
                bonds.append(Bond(i, j))
    return bonds


def find_bonds_hashed(atoms, cutoff=BOND_CUTOFF):
    """
    Same result as find_bonds, but only tests pairs that fall in
    neighbouring cells of a SpaceHash whose cells are at least cutoff wide.
    """
    # nan or inf coordinates never bond, and cannot be hashed
    atom_indices = [i for i, atom in enumerate(atoms) if all(map(math.isfinite, atom.position))]
    if len(atom_indices) < 2:
        return []
    vertices = [atoms[i].position for i in atom_indices]
    space_hash = SpaceHash(vertices, div=max(cutoff, SpaceHash.default_div))
    pairs = sorted((atom_indices[k], atom_indices[l]) for k, l in space_hash.close_pairs())
    bonds = []
    for i, j in pairs:
        if pos_distance(atoms[i].position, atoms[j].position) < cutoff:
            bonds.append(Bond(i, j))
    return bonds


class Molecule:
    """
    Atoms from one coordinate file together with their inferred bonds.

    Atoms keep file order and bonds index into that order. Nothing is
    added or removed once the molecule is built.
    """

    def __init__(self, atoms, cutoff=BOND_CUTOFF):
        self.atoms = tuple(atoms)
        for atom in self.atoms:
            get_element(atom.element_id)

        self.positions = np.array(
            [atom.position for atom in self.atoms], dtype=np.float32
        ).reshape(-1, 3)
        self.positions.flags.writeable = False

        logger.info("Finding bonds...")
        if len(self.atoms) > N_ATOM_HASHED:
            self.bonds = tuple(find_bonds_hashed(self.atoms, cutoff))
        else:
            self.bonds = tuple(find_bonds(self.atoms, cutoff))
        logger.info("Found %d bonds between %d atoms", len(self.bonds), len(self.atoms))

    def get_atom_count(self):
        return len(self.atoms)

    def get_bond_count(self):
        return len(self.bonds)

    def get_element(self, atom_idx):
        return get_element(self.atoms[atom_idx].element_id)

    def get_center(self):
        if len(self.atoms) == 0:
            return np.zeros(3, dtype=np.float32)
        return np.mean(self.positions, axis=0)
