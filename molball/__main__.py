"""
Entry point for running molball as a module: python -m molball [xyz_file]
"""

import logging
import sys

from .camera import DIRECT, CameraController, CameraPose
from .frameloop import run_frame_loop
from .parser import ParseError, load_xyz
from .structures import Molecule

logger = logging.getLogger("molball")

DEFAULT_XYZ_FNAME = "molecule.xyz"
WIDTH = 800
HEIGHT = 600
TITLE = "molball"
TARGET_FPS = 60


def load_molecule(fname):
    return Molecule(load_xyz(fname))


def main(argv=None):
    """Main entry point for the molball viewer."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        print("Usage: python -m molball [xyz_file]")
        print("Example: python -m molball water.xyz")
        return 2
    fname = argv[0] if argv else DEFAULT_XYZ_FNAME

    try:
        molecule = load_molecule(fname)
    except (OSError, ParseError) as e:
        logger.error("Failed to load %s: %s", fname, e)
        return 1

    from .viewer import MolecularViewerWindow

    logger.info("Creating window for %s...", fname)
    window = MolecularViewerWindow(WIDTH, HEIGHT, TITLE)
    try:
        window.set_target_fps(TARGET_FPS)
        run_frame_loop(window, molecule, CameraPose(), CameraController(DIRECT))
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
