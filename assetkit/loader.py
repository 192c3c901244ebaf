"""Loading assets from disk and building the built-in cube geometry."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

from .assets import Geometry, Shader, Texture, TextureFormat

PathLike = Union[str, "os.PathLike[str]"]

_INCLUDE_DIRECTIVE = "#include"

_CUBE_FACES = (
    # (four corner positions, normal, tangent)
    (
        ((-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0)),
        (0.0, 0.0, 1.0),
        (1.0, 0.0, 0.0, 1.0),
    ),
    (
        ((1.0, -1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0)),
        (0.0, 0.0, -1.0),
        (-1.0, 0.0, 0.0, 1.0),
    ),
    (
        ((1.0, -1.0, 1.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0)),
        (1.0, 0.0, 0.0),
        (0.0, 0.0, -1.0, 1.0),
    ),
    (
        ((-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0)),
        (-1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 1.0),
    ),
    (
        ((-1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0)),
        (0.0, 1.0, 0.0),
        (1.0, 0.0, 0.0, 1.0),
    ),
    (
        ((-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0)),
        (0.0, -1.0, 0.0),
        (1.0, 0.0, 0.0, 1.0),
    ),
)
_FACE_TEX_COORDS = (0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0)
_FACE_INDICES = (0, 1, 2, 2, 3, 0)


def _include_target(line: str) -> str:
    """Return the file named between the first and last quote of an include line."""
    start = line.find('"') + 1
    end = line.rfind('"')
    if end == -1 or end < start:
        return line[start:]
    return line[start:end]


def read_shader_with_includes(path: PathLike, base_dir: str) -> str:
    """Read a shader file, inlining every ``#include "file"`` line recursively.

    Included files are looked up at ``base_dir + file``; every emitted line ends
    with a newline.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError(f"Failed to open shader file: {os.fspath(path)}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    parts: list[str] = []
    for line in lines:
        if line.startswith(_INCLUDE_DIRECTIVE):
            parts.append(read_shader_with_includes(base_dir + _include_target(line), base_dir))
        else:
            parts.append(line + "\n")
    return "".join(parts)


def create_cube_geometry() -> Geometry:
    """Build a unit cube of 24 vertices, four per face, with normals and tangents."""
    geometry = Geometry()
    for face, (corners, normal, tangent) in enumerate(_CUBE_FACES):
        base = face * len(corners)
        for corner in corners:
            geometry.positions.extend(corner)
            geometry.normals.extend(normal)
            geometry.tangents.extend(tangent)
        geometry.tex_coords.extend(_FACE_TEX_COORDS)
        geometry.indices.extend(base + offset for offset in _FACE_INDICES)
    return geometry


def load_texture(path: PathLike) -> Texture | None:
    """Load an image as an RGBA8 texture, or return None if it cannot be read."""
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
    except (OSError, ValueError):
        return None

    width, height = rgba.size
    return Texture(
        name=os.fspath(path),
        width=width,
        height=height,
        channels=4,
        format=TextureFormat.RGBA8,
        data=rgba.tobytes(),
    )


def load_shader(vertex_path: PathLike, fragment_path: PathLike, base_path: str = "") -> Shader:
    """Load a vertex/fragment shader pair with their includes inlined."""
    return Shader(
        vertex_path=os.fspath(vertex_path),
        fragment_path=os.fspath(fragment_path),
        vertex_source=read_shader_with_includes(vertex_path, base_path),
        fragment_source=read_shader_with_includes(fragment_path, base_path),
    )