"""
Window for the molecule viewer.

MolecularViewerWindow wraps a vispy canvas in a polled, immediate-mode
interface: the caller brackets each frame with begin_drawing/end_drawing,
issues spheres and cylinders between begin_mode3d/end_mode3d, and reads
key state and frame time between frames. Pending window events are
processed once per frame, at the end of end_drawing.
"""

import logging
import time

import OpenGL.GL as gl
from vispy import app, gloo
from vispy.gloo import Program

from .elements import unpack_color
from .rendering import Camera, MeshBuilder, TriangleBatch, flat_fragment, flat_vertex, update_camera

logger = logging.getLogger(__name__)


class MolecularViewerWindow(app.Canvas):
    """
    The one rendering context of the process. Create it once, draw
    frames until should_close() is True, then close() it.
    """

    def __init__(self, width, height, title):
        app.Canvas.__init__(self, title=title, size=(width, height), keys="interactive")
        self.program = Program(flat_vertex, flat_fragment)
        self.camera = Camera(width, height)
        self.batch = TriangleBatch()
        self.mesh_builder = MeshBuilder(self.batch)

        self.pressed_keys = set()
        self.is_closed = False
        self.target_frame_time = 0.0
        self.frame_time = 0.0
        self.frame_start = time.perf_counter()

        self.show()
        app.process_events()

    def on_key_press(self, event):
        if event.key is not None:
            self.pressed_keys.add(event.key.name.upper())

    def on_key_release(self, event):
        if event.key is not None:
            self.pressed_keys.discard(event.key.name.upper())

    def on_close(self, event):
        self.is_closed = True

    def should_close(self):
        return self.is_closed

    def set_target_fps(self, fps):
        self.target_frame_time = 1.0 / fps if fps > 0 else 0.0

    def get_frame_time(self):
        """Seconds taken by the previous frame."""
        return self.frame_time

    def is_key_down(self, key):
        return key.upper() in self.pressed_keys

    def update_camera(self, pose, mode):
        update_camera(pose, mode, self.frame_time)

    def begin_drawing(self):
        self.set_current()
        width, height = self.physical_size
        if width != self.camera.width or height != self.camera.height:
            self.camera.resize(width, height)
        gl.glViewport(0, 0, width, height)

    def clear_background(self, color):
        gl.glClearColor(*unpack_color(color))
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def begin_mode3d(self, pose):
        self.camera.set_pose(pose)
        self.batch.clear()
        gloo.set_state(depth_test=True)

    def draw_sphere(self, center, radius, color):
        self.mesh_builder.add_sphere(center, radius, color)

    def draw_cylinder(self, p1, p2, radius, color):
        self.mesh_builder.add_cylinder(p1, p2, radius, color)

    def end_mode3d(self):
        if self.batch.is_empty():
            return
        self.program["u_view"] = self.camera.view
        self.program["u_projection"] = self.camera.projection
        self.program.bind(gloo.VertexBuffer(self.batch.get_vertex_data()))
        self.program.draw("triangles", gloo.IndexBuffer(self.batch.get_index_data()))
        self.batch.clear()

    def end_drawing(self):
        self.swap_buffers()
        app.process_events()

        elapsed = time.perf_counter() - self.frame_start
        if elapsed < self.target_frame_time:
            time.sleep(self.target_frame_time - elapsed)

        now = time.perf_counter()
        self.frame_time = now - self.frame_start
        self.frame_start = now

    def close(self):
        logger.info("Closing window")
        self.is_closed = True
        app.Canvas.close(self)
