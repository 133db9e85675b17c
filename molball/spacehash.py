"""
Grid hashing of atom positions, used to find candidate bonded pairs
without testing every pair of atoms.
"""

import array
import math


class SpaceHash(object):
    """
    Buckets 3D points into cubic cells of side div.

    Two points closer than div always sit in the same or in adjacent
    cells, so close_pairs only has to look at the 27 cells around each
    point.

    Args:
        vertices: sequence of (x, y, z) points
        div: cell size, no smaller than the distance being searched for
        padding: margin added around the bounding box
    """

    default_div = 5.3

    def __init__(self, vertices, div=default_div, padding=0.05):
        self.vertices = vertices
        self.div = div
        self.inv_div = 1.0 / self.div
        self.padding = padding

        self.minima = [min(v[i] for v in vertices) - padding for i in range(3)]
        maxima = [max(v[i] for v in vertices) + padding for i in range(3)]
        self.sizes = [
            max(1, int(math.ceil((maxima[i] - self.minima[i]) * self.inv_div)))
            for i in range(3)
        ]

        self.cells = {}
        self.spaces = []
        for i_vertex, vertex in enumerate(vertices):
            space = self.vertex_to_space(vertex)
            self.spaces.append(space)
            cell = self.cells.setdefault(self.space_to_hash(space), array.array("L"))
            cell.append(i_vertex)

    def vertex_to_space(self, v):
        return [
            min(self.sizes[i] - 1, int((v[i] - self.minima[i]) * self.inv_div))
            for i in range(3)
        ]

    def space_to_hash(self, s):
        return (s[0] * self.sizes[1] + s[1]) * self.sizes[2] + s[2]

    def neighbourhood(self, space):
        def dim_range(i_dim):
            return range(max(0, space[i_dim] - 1), min(self.sizes[i_dim], space[i_dim] + 2))

        for s0 in dim_range(0):
            for s1 in dim_range(1):
                for s2 in dim_range(2):
                    yield [s0, s1, s2]

    def close_pairs(self):
        """Yields (i, j), i < j, for every pair in neighbouring cells."""
        for i_vertex0, space0 in enumerate(self.spaces):
            for space1 in self.neighbourhood(space0):
                for i_vertex1 in self.cells.get(self.space_to_hash(space1), []):
                    if i_vertex0 < i_vertex1:
                        yield i_vertex0, i_vertex1
