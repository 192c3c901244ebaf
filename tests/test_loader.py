from pathlib import Path

import pytest
from PIL import Image

from assetkit.assets import TextureFormat
from assetkit.loader import (
    create_cube_geometry,
    load_shader,
    load_texture,
    read_shader_with_includes,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8", newline="")
    return path


def test_include_is_inlined(tmp_path):
    _write(tmp_path / "common.glsl", "float common;\n")
    main = _write(tmp_path / "main.glsl", 'void a;\n#include "common.glsl"\nvoid main;\n')
    result = read_shader_with_includes(main, str(tmp_path) + "/")
    assert result == "void a;\nfloat common;\nvoid main;\n"


def test_nested_includes(tmp_path):
    _write(tmp_path / "inner.glsl", "inner\n")
    _write(tmp_path / "outer.glsl", '#include "inner.glsl"\nouter\n')
    main = _write(tmp_path / "main.glsl", '#include "outer.glsl"\nmain\n')
    result = read_shader_with_includes(main, str(tmp_path) + "/")
    assert result == "inner\nouter\nmain\n"


def test_last_line_gets_newline(tmp_path):
    main = _write(tmp_path / "main.glsl", "first\nlast")
    assert read_shader_with_includes(main, "") == "first\nlast\n"


def test_empty_file_gives_empty_source(tmp_path):
    main = _write(tmp_path / "main.glsl", "")
    assert read_shader_with_includes(main, "") == ""


def test_missing_shader_raises(tmp_path):
    with pytest.raises(OSError, match="Failed to open shader file"):
        read_shader_with_includes(tmp_path / "missing.glsl", "")


def test_missing_include_raises(tmp_path):
    main = _write(tmp_path / "main.glsl", '#include "gone.glsl"\n')
    with pytest.raises(OSError, match="gone.glsl"):
        read_shader_with_includes(main, str(tmp_path) + "/")


def test_load_shader(tmp_path):
    _write(tmp_path / "lib.glsl", "lib\n")
    vertex = _write(tmp_path / "v.glsl", '#include "lib.glsl"\nvertex\n')
    fragment = _write(tmp_path / "f.glsl", "fragment\n")
    shader = load_shader(str(vertex), str(fragment), str(tmp_path) + "/")
    assert shader.vertex_path == str(vertex)
    assert shader.fragment_path == str(fragment)
    assert shader.vertex_source == "lib\nvertex\n"
    assert shader.fragment_source == "fragment\n"


def test_cube_stream_sizes_agree():
    cube = create_cube_geometry()
    vertices = len(cube.positions) // 3
    assert vertices == 24
    assert len(cube.normals) // 3 == vertices
    assert len(cube.tex_coords) // 2 == vertices
    assert len(cube.tangents) // 4 == vertices


def test_cube_indices_cover_all_vertices():
    cube = create_cube_geometry()
    vertices = len(cube.positions) // 3
    assert len(cube.indices) % 3 == 0
    assert set(cube.indices) == set(range(vertices))


def test_cube_positions_are_corners():
    cube = create_cube_geometry()
    assert all(abs(value) == 1.0 for value in cube.positions)
    assert cube.positions[:3] == [-1.0, -1.0, 1.0]


def test_cube_normals_orthogonal_to_tangents():
    cube = create_cube_geometry()
    for v in range(len(cube.positions) // 3):
        normal = cube.normals[3 * v : 3 * v + 3]
        tangent = cube.tangents[4 * v : 4 * v + 3]
        assert sum(n * n for n in normal) == 1.0
        assert sum(n * t for n, t in zip(normal, tangent)) == 0.0


def test_cube_positions_lie_on_normal_face():
    cube = create_cube_geometry()
    for v in range(len(cube.positions) // 3):
        position = cube.positions[3 * v : 3 * v + 3]
        normal = cube.normals[3 * v : 3 * v + 3]
        assert sum(p * n for p, n in zip(position, normal)) == 1.0


def test_load_texture_converts_to_rgba(tmp_path):
    path = tmp_path / "tex.png"
    image = Image.new("RGB", (2, 1))
    image.putdata([(10, 20, 30), (40, 50, 60)])
    image.save(path)

    texture = load_texture(path)
    assert texture.width == 2
    assert texture.height == 1
    assert texture.channels == 4
    assert texture.format is TextureFormat.RGBA8
    assert texture.name == str(path)
    assert texture.data == bytes([10, 20, 30, 255, 40, 50, 60, 255])


def test_load_texture_missing_file(tmp_path):
    assert load_texture(tmp_path / "missing.png") is None


def test_load_texture_not_an_image(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image at all")
    assert load_texture(path) is None