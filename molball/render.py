# -*- coding: utf-8 -*-

"""
Unit sphere and cylinder meshes, and the transforms that place them
as atoms and bonds.
"""

import math

import numpy as np


def rotation_matrix(axis, angle):
    """Create a 4x4 rotation matrix for rotating around axis by angle (radians)"""
    axis = axis / np.linalg.norm(axis)
    a = math.cos(angle / 2.0)
    b, c, d = -axis * math.sin(angle / 2.0)
    aa, bb, cc, dd = a * a, b * b, c * c, d * d
    bc, ad, ac, ab, bd, cd = b * c, a * d, a * c, a * b, b * d, c * d
    rot = np.array(
        [
            [aa + bb - cc - dd, 2 * (bc + ad), 2 * (bd - ac), 0],
            [2 * (bc - ad), aa + cc - bb - dd, 2 * (cd + ab), 0],
            [2 * (bd + ac), 2 * (cd - ab), aa + dd - bb - cc, 0],
            [0, 0, 0, 1],
        ],
        dtype=np.float32,
    )
    return rot


def get_xy_face_transform(tangent, up, scale):
    m = np.eye(4, dtype=np.float32)
    left = np.cross(up, tangent)
    m[:3, 0] = scale * (left / np.linalg.norm(left))
    m[:3, 1] = scale * (np.cross(tangent, left) / np.linalg.norm(np.cross(tangent, left)))
    m[:3, 2] = scale * (tangent / np.linalg.norm(tangent))
    return m


def get_perpendicular(v):
    """Any vector perpendicular to v, built from the axis v leans on least."""
    axis = np.zeros(3, dtype=np.float32)
    axis[int(np.argmin(np.abs(v)))] = 1.0
    return np.cross(v, axis)


class Cylinder:
    """Open cylinder of unit radius running from z=0 to z=1."""

    def __init__(self, n_arc):
        self.points = []
        self.indices = []
        arc_angle = math.pi * 2.0 / n_arc
        for z in [0.0, 1.0]:
            for j in range(n_arc):
                x = math.cos(j * arc_angle)
                y = math.sin(j * arc_angle)
                self.points.append(np.array([x, y, z], dtype=np.float32))
        for i_arc in range(n_arc):
            j_arc = (i_arc + 1) % n_arc
            self.indices.extend([j_arc, i_arc, n_arc + i_arc, j_arc, n_arc + i_arc, n_arc + j_arc])
        self.points = np.array(self.points)
        self.n_vertex = 2 * n_arc

    def get_orientate(self, tangent, up, scale):
        """
        Transform stretches the length to the length of tangent and
        the radius to scale.
        """
        z_scale = np.linalg.norm(tangent) / scale
        scaling = np.eye(4, dtype=np.float32)
        scaling[2, 2] = z_scale
        return np.dot(get_xy_face_transform(tangent, up, scale), scaling)

    def get_vertices(self, p1, p2, radius):
        """Mesh points of a cylinder of the given radius from p1 to p2."""
        tangent = np.asarray(p2, dtype=np.float32) - np.asarray(p1, dtype=np.float32)
        orientate = self.get_orientate(tangent, get_perpendicular(tangent), radius)
        return np.dot(self.points, orientate[:3, :3].T) + np.asarray(p1, dtype=np.float32)


class Sphere:
    """Unit sphere, centered on the origin."""

    def __init__(self, n_stack=5, n_arc=5):
        self.indices = []
        self.points = []
        vert_angle = math.pi / (n_stack - 1)
        arc_angle = math.pi * 2.0 / n_arc
        for i_stack in range(n_stack):
            radius = math.sin(i_stack * vert_angle)
            z = -math.cos(i_stack * vert_angle)
            for i_arc in range(n_arc):
                x = radius * math.cos(i_arc * arc_angle)
                y = radius * math.sin(i_arc * arc_angle)
                self.points.append(np.array([x, y, z], dtype=np.float32))
        for i_stack in range(n_stack - 1):
            for i_arc in range(n_arc):
                j_arc = (i_arc + 1) % n_arc
                self.indices.extend(
                    [
                        (i_stack) * n_arc + i_arc,
                        (i_stack + 1) * n_arc + i_arc,
                        (i_stack + 1) * n_arc + j_arc,
                        (i_stack + 1) * n_arc + j_arc,
                        (i_stack) * n_arc + j_arc,
                        (i_stack) * n_arc + i_arc,
                    ]
                )
        self.points = np.array(self.points)
        self.n_vertex = n_stack * n_arc

    def get_orientate(self, scale):
        m = np.eye(4, dtype=np.float32)
        m[0, 0] = m[1, 1] = m[2, 2] = scale
        return m

    def get_vertices(self, center, radius):
        orientate = self.get_orientate(radius)
        return np.dot(self.points, orientate[:3, :3].T) + np.asarray(center, dtype=np.float32)
