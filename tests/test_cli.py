from assetkit.cli import main

SHADER = '{"vertexPath": "shaders/v.glsl", "fragmentPath": "shaders/f.glsl"}'
TEXTURE = '{"width": 4, "height": 2, "channels": 4}'
GEOMETRY = '{"positions": [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]}'
MATERIAL = (
    '{"shaderId": 1, "baseColor": [1.0, 1.0, 1.0, 1.0], "metallic": 0.5,'
    ' "roughness": 0.25, "albedoTextureId": 1, "normalTextureId": 1,'
    ' "metallicRoughnessTextureId": 1}'
)


def _write_assets(directory, **overrides):
    files = {
        "shader.json": SHADER,
        "texture.json": TEXTURE,
        "geometry.json": GEOMETRY,
        "material.json": MATERIAL,
    }
    files.update({f"{name}.json": text for name, text in overrides.items()})
    for name, text in files.items():
        if text is not None:
            (directory / name).write_text(text, encoding="utf-8")
    return directory


def test_main_reports_loaded_assets(tmp_path, capsys):
    assert main([str(_write_assets(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "Shader vertex path: shaders/v.glsl" in out
    assert "Texture size: 4x2, channels: 4" in out
    assert "Material metallic: 0.5, roughness: 0.25" in out
    assert "Mesh links Geometry ID: 1, Material ID: 2" in out
    assert "--- Loaded Assets ---" in out


def test_main_counts_vertices_from_positions(tmp_path, capsys):
    main([str(_write_assets(tmp_path))])
    out = capsys.readouterr().out
    assert "Geometry vertices: 2 (assuming 3 floats per position)" in out


def test_main_loading_order(tmp_path, capsys):
    main([str(_write_assets(tmp_path))])
    lines = capsys.readouterr().out.splitlines()
    steps = [line for line in lines if line.startswith(("Loading", "Creating"))]
    assert steps == [
        "Loading Shader...",
        "Loading Texture...",
        "Loading Geometry...",
        "Loading Material...",
        "Creating Mesh...",
    ]


def test_main_missing_file_is_fatal(tmp_path, capsys):
    _write_assets(tmp_path, shader=None)
    assert main([str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Fatal error: ")
    assert captured.out.strip() == "Loading Shader..."


def test_main_bad_material_is_fatal(tmp_path, capsys):
    bad = MATERIAL.replace("[1.0, 1.0, 1.0, 1.0]", "[1.0]")
    assert main([str(_write_assets(tmp_path, material=bad))]) == 1
    assert "Fatal error: baseColor must have exactly 4 floats!" in capsys.readouterr().err


def test_main_parse_error_is_fatal(tmp_path, capsys):
    assert main([str(_write_assets(tmp_path, texture="[]"))]) == 1
    assert "JSON must start with '{'" in capsys.readouterr().err


def test_main_missing_key_reports_key(tmp_path, capsys):
    assert main([str(_write_assets(tmp_path, shader='{"vertexPath": "v"}'))]) == 1
    assert "Fatal error: Config key not found: fragmentPath" in capsys.readouterr().err