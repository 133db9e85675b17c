"""
Rendering components for the molecule viewer.

Contains the view/projection matrices for a camera pose, the built-in
orbital camera update, the triangle batch that collects spheres and
cylinders during a frame, and the flat-colour shader program.

Matrices follow the vispy convention (row vectors, uploaded as is), so
they combine with vispy.util.transforms.
"""

import math

import numpy as np
from vispy.util.transforms import ortho, perspective

from . import render
from .camera import ORBITAL, ORTHOGRAPHIC
from .elements import unpack_color

ORBIT_SPEED = 0.5  # radians per second

Z_NEAR = 0.01
Z_FAR = 1000.0


def identity():
    return np.eye(4, dtype=np.float32)


def normalize(v):
    return v / np.linalg.norm(v)


def look_at(eye, target, up):
    """
    View matrix for an eye looking at target. If up is parallel to the
    view direction another axis is used in its place.
    """
    eye = np.asarray(eye, dtype=np.float32)
    forward = normalize(np.asarray(target, dtype=np.float32) - eye)
    side = np.cross(forward, up)
    if not np.any(side):
        side = render.get_perpendicular(forward)
    side = normalize(side)
    true_up = np.cross(side, forward)

    m = identity()
    m[:3, 0] = side
    m[:3, 1] = true_up
    m[:3, 2] = -forward
    m[3, 0] = -np.dot(side, eye)
    m[3, 1] = -np.dot(true_up, eye)
    m[3, 2] = np.dot(forward, eye)
    return m


class Camera:
    """View transformation derived from a CameraPose for a viewport."""

    def __init__(self, width=800, height=600):
        self.view = identity()
        self.projection = identity()
        self.resize(width, height)

    def resize(self, width, height):
        self.width, self.height = width, height

    def get_aspect(self):
        return self.width / float(max(1, self.height))

    def set_pose(self, pose):
        self.view = look_at(pose.position, pose.target, pose.up)
        aspect = self.get_aspect()
        if pose.projection == ORTHOGRAPHIC:
            half_height = 0.5 * pose.fovy
            half_width = half_height * aspect
            self.projection = ortho(
                -half_width, half_width, -half_height, half_height, Z_NEAR, Z_FAR
            )
        else:
            self.projection = perspective(pose.fovy, aspect, Z_NEAR, Z_FAR)


def update_camera(pose, mode, dt):
    """
    Built-in camera schemes, applied in place. ORBITAL spins the position
    around the up axis through the target.
    """
    if mode != ORBITAL:
        raise ValueError(f"Unsupported camera mode {mode!r}")
    rotation = render.rotation_matrix(pose.up, ORBIT_SPEED * dt)
    offset = pose.position - pose.target
    pose.position[:] = np.dot(rotation[:3, :3], offset) + pose.target


class TriangleBatch:
    """
    Collects colored triangle meshes for one frame into flat arrays for
    a single draw call.
    """

    def __init__(self):
        self.clear()

    def clear(self):
        self.positions = []
        self.colors = []
        self.indices = []
        self.n_vertex = 0

    def add_mesh(self, points, indices, color):
        n_point = len(points)
        self.positions.append(np.asarray(points, dtype=np.float32))
        self.colors.append(np.tile(np.array(unpack_color(color), dtype=np.float32), (n_point, 1)))
        self.indices.append(np.asarray(indices, dtype=np.uint32) + self.n_vertex)
        self.n_vertex += n_point

    def is_empty(self):
        return self.n_vertex == 0

    def get_vertex_data(self):
        data = np.zeros(self.n_vertex, [("a_position", np.float32, 3), ("a_color", np.float32, 4)])
        data["a_position"] = np.concatenate(self.positions)
        data["a_color"] = np.concatenate(self.colors)
        return data

    def get_index_data(self):
        return np.concatenate(self.indices)


class MeshBuilder:
    """Adds atom spheres and bond cylinders to a TriangleBatch."""

    def __init__(self, batch, sphere_stack=10, sphere_arc=12, tube_arc=8):
        self.batch = batch
        self.sphere = render.Sphere(sphere_stack, sphere_arc)
        self.cylinder = render.Cylinder(tube_arc)

    def add_sphere(self, center, radius, color):
        points = self.sphere.get_vertices(center, radius)
        self.batch.add_mesh(points, self.sphere.indices, color)

    def add_cylinder(self, p1, p2, radius, color):
        length = np.linalg.norm(np.subtract(p2, p1))
        if length == 0 or math.isnan(length):
            return
        points = self.cylinder.get_vertices(p1, p2, radius)
        self.batch.add_mesh(points, self.cylinder.indices, color)


flat_vertex = """
uniform mat4 u_view;
uniform mat4 u_projection;

attribute vec3 a_position;
attribute vec4 a_color;

varying vec4 v_color;

void main (void)
{
    gl_Position = u_projection * u_view * vec4(a_position, 1.0);
    v_color = a_color;
}
"""


flat_fragment = """
varying vec4 v_color;

void main()
{
    gl_FragColor = v_color;
}
"""
