"""3D math, colors, meshes, scene data, demo content and model-import helpers."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "debug_draw",
    "importer",
    "matrix",
    "mesh_states",
    "scene",
    "shapes",
    "solar_system",
    "vector",
    "vertex_types",
]