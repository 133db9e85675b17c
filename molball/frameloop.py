"""
The viewer's frame loop.

Each pass checks for the close signal, moves the camera using the
previous frame's duration and the current key state, then draws the
molecule: background, one sphere per atom, one cylinder per bond.
"""

import logging

from .elements import BACKGROUND_COLOR, BOND_COLOR, BOND_RADIUS, get_element

logger = logging.getLogger(__name__)


def draw_molecule(window, molecule):
    for atom in molecule.atoms:
        element = get_element(atom.element_id)
        window.draw_sphere(atom.position, element.radius, element.color)
    for bond in molecule.bonds:
        window.draw_cylinder(
            molecule.atoms[bond.atom1_idx].position,
            molecule.atoms[bond.atom2_idx].position,
            BOND_RADIUS,
            BOND_COLOR,
        )


def draw_frame(window, molecule, pose):
    window.begin_drawing()
    window.clear_background(BACKGROUND_COLOR)
    window.begin_mode3d(pose)
    draw_molecule(window, molecule)
    window.end_mode3d()
    window.end_drawing()


def run_frame_loop(window, molecule, pose, controller):
    """
    Draws frames until the window asks to close. Returns the number
    of frames drawn.
    """
    n_frame = 0
    while not window.should_close():
        dt = window.get_frame_time()
        controller.update(pose, dt, window)
        draw_frame(window, molecule, pose)
        n_frame += 1
    logger.info("Frame loop finished after %d frames", n_frame)
    return n_frame
