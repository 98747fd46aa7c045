"""A flat grid of quads with per-vertex normals and a surface material."""

from __future__ import annotations

from dataclasses import dataclass, field

from robotsiege.vector import Vector3

RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Material:
    """Lighting material: RGBA colours and a shininess exponent."""

    ambient: RGBA = (0.0, 0.0, 0.0, 1.0)
    diffuse: RGBA = (0.9, 0.5, 0.0, 1.0)
    specular: RGBA = (0.0, 0.0, 0.0, 1.0)
    shininess: float = 0.0


@dataclass(eq=False)
class MeshVertex:
    """A mesh vertex; shared between the quads that touch it."""

    position: Vector3
    normal: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True, eq=False)
class MeshQuad:
    """Four vertices in counterclockwise order."""

    vertices: tuple[MeshVertex, MeshVertex, MeshVertex, MeshVertex]


class QuadMesh:
    """A square grid of quads spanned by two direction vectors."""

    min_mesh_size = 1

    def __init__(self, max_mesh_size: int = 40, mesh_dim: float = 1.0) -> None:
        self.max_mesh_size = max(max_mesh_size, self.min_mesh_size)
        self.mesh_dim = mesh_dim
        self.mesh_size = 0
        self.vertices: list[MeshVertex] = []
        self.quads: list[MeshQuad] = []
        self.material = Material()

    def max_mesh_dimensions(self) -> tuple[int, int]:
        """Return the allowed ``(minimum, maximum)`` grid size."""
        return self.min_mesh_size, self.max_mesh_size

    def init_mesh(
        self,
        mesh_size: int,
        origin: Vector3,
        mesh_length: float,
        mesh_width: float,
        dir1: Vector3,
        dir2: Vector3,
    ) -> None:
        """Build a ``mesh_size`` x ``mesh_size`` grid starting at ``origin``.

        Rows run along ``dir1`` over ``mesh_length``; successive rows step
        along ``dir2`` over ``mesh_width``.
        """
        if not self.min_mesh_size <= mesh_size <= self.max_mesh_size:
            raise ValueError(
                f"mesh size {mesh_size} outside "
                f"{self.min_mesh_size}..{self.max_mesh_size}"
            )
        step1 = dir1 * (mesh_length / mesh_size)
        step2 = dir2 * (mesh_width / mesh_size)
        points = range(mesh_size + 1)

        grid = [
            [MeshVertex(origin + step2 * row + step1 * col) for col in points]
            for row in points
        ]
        self.vertices = [vertex for row in grid for vertex in row]
        self.quads = [
            MeshQuad((near[k], near[k + 1], far[k + 1], far[k]))
            for near, far in zip(grid, grid[1:])
            for k in range(mesh_size)
        ]
        self.mesh_size = mesh_size
        self.compute_normals()

    def set_material(
        self,
        ambient: Vector3,
        diffuse: Vector3,
        specular: Vector3,
        shininess: float,
    ) -> None:
        """Set the surface material from RGB vectors; alpha is always 1."""
        self.material = Material(
            ambient=(*ambient, 1.0),
            diffuse=(*diffuse, 1.0),
            specular=(*specular, 1.0),
            shininess=shininess,
        )

    def compute_normals(self) -> None:
        """Give each vertex the unit normal of its corner in the last quad that uses it."""
        for quad in self.quads:
            positions = [vertex.position for vertex in quad.vertices]
            edges = [
                (end - start).normalized()
                for start, end in zip(positions, positions[1:] + positions[:1])
            ]
            previous = edges[-1:] + edges[:-1]
            for vertex, edge, before in zip(quad.vertices, edges, previous):
                vertex.normal = edge.cross(-before).normalized()