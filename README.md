# assetkit

A small toolkit for describing and managing the assets of a 3D renderer:
geometry, textures, shaders, materials and meshes. Assets are referred to
through typed handles and kept in a registry that falls back to built-in
defaults when a handle is unknown. Asset descriptions are read from a compact
JSON-like configuration format.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
assetkit [ASSETS_DIR]
```

`ASSETS_DIR` defaults to `assets`. The directory must hold:

- `shader.json`
- `texture.json`
- `geometry.json`
- `material.json`

Each file is parsed and deserialized into its asset, a mesh linking geometry
id 1 and material id 2 is created, and a summary is printed: the shader's
vertex path, the texture size and channel count, the number of vertices
(position floats divided by three), the material's metallic and roughness
values and the mesh's ids. A missing file, a parse error or a missing or
mistyped key is reported on standard error as `Fatal error: ...` and the
command exits with status 1.

## The configuration format

The format looks like JSON, with some restrictions (`assetkit.parser`):

- the document is an object; keys are quoted strings; an object must hold at
  least one key;
- nested objects are flattened into dotted keys, so
  `{"camera": {"fov": 60}}` stores the key `camera.fov`;
- a number containing `.` is a float (single precision); any other number is
  an unsigned 32-bit integer, with negative or larger values wrapping around;
- arrays hold numbers only and always come back as lists of floats;
- `true` and `false` are booleans;
- strings support the escapes `\"`, `\\`, `\n` and `\t` only.

`parse_config(text)` parses a string, `load_config(path)` reads a UTF-8 file.
Both return a `Config`. Malformed input raises `ConfigParseError` (a
`ValueError`) carrying `message`, `line` and `column`.

Example `material.json`:

```json
{
  "shaderId": 1,
  "baseColor": [1.0, 0.5, 0.25, 1.0],
  "metallic": 0.0,
  "roughness": 0.5,
  "albedoTextureId": 1,
  "normalTextureId": 1,
  "metallicRoughnessTextureId": 1
}
```

`metallic` and `roughness` must be written with a decimal point so that they
are read as floats, and `baseColor` must hold exactly four values.

## Configuration values

`assetkit.config` holds the value model:

- `ValueKind` – `INT`, `FLOAT`, `BOOL`, `UINT32`, `STRING`, `FLOAT_LIST`,
  `UINT32_LIST`;
- `ConfigValue(value, kind=None)` – a value tagged with its kind (inferred
  when not given); `get(kind)` returns it or raises `TypeError` for another
  kind, `is_kind(kind)` tests the kind;
- `Config` – a flat mapping of keys to values with `set(key, value)`,
  `get(key, kind)` (raises `KeyError` for a missing key, `TypeError` for a
  wrong kind) and `get_optional(key, kind)` (returns `None` in either case);
  it also supports `in`, iteration over keys and `len`;
- `Serializable` – the abstract `serialize(out)` / `deserialize(config)`
  interface the asset types implement.

## Assets

`assetkit.assets` defines dataclasses that serialize to and from a `Config`:

- `Texture` – `name`, `width`, `height`, `channels`, `format`
  (`TextureFormat`: `UNKNOWN`, `RGBA8`, `RGB8`, `GRAY8`) and `data`;
  serializes only the dimensions and format, and reads back whichever of
  them are present;
- `Shader` – `vertex_path` and `fragment_path` (required when reading) and
  the optional `vertex_source` and `fragment_source`;
- `Geometry` – `positions`, `normals`, `tex_coords`, `tangents` and
  `indices`; reads whichever streams are present (indices given as floats
  must be non-negative whole numbers);
- `Material` – `shader_id`, `base_color`, `metallic`, `roughness` and three
  texture handles; all keys are required when reading;
- `Mesh` – `geometry_id` and `material_id`.

```python
from assetkit.parser import parse_config
from assetkit.assets import Shader
from assetkit.config import Config

shader = Shader()
shader.deserialize(parse_config('{"vertexPath": "v.glsl", "fragmentPath": "f.glsl"}'))
print(shader.vertex_path)

out = Config()
shader.serialize(out)
```

## Handles and the asset manager

`AssetHandle(id)` (in `assetkit.handle`) is a frozen, hashable handle; id 0
means "no asset", and `is_valid()` and `bool(handle)` report whether it
refers to one.

```python
from assetkit.manager import AssetManager, create_default_quad_geometry

manager = AssetManager()
handle = manager.register_geometry(create_default_quad_geometry())
assert handle.is_valid()
quad = manager.get_geometry(handle)
```

`AssetManager` has `register_*` and `get_*` methods for geometries, textures,
materials, meshes and shaders. Ids start at 1 for each kind. Looking up an
unknown handle returns that kind's default, or raises `KeyError` when no
default has been registered.

`initialize_defaults()` registers a quad geometry, a 2x2 opaque black
texture, the shader pair `assets/shaders/brdf/vertex.glsl` and
`assets/shaders/brdf/fragment.glsl` (read relative to the working directory;
`OSError` if missing), a material using the default texture and shader, and a
mesh linking the default quad and material. Their handles are available as
`default_geometry`, `default_texture`, `default_shader`, `default_material`
and `default_mesh`.

`assetkit.manager` also offers `create_default_quad_geometry()`,
`create_default_texture()`, `create_default_material(texture)` and
`create_default_mesh(geometry, material)`.

## Loading from disk

`assetkit.loader` provides:

- `load_texture(path)` – decodes an image with Pillow into RGBA8 pixel data,
  or returns `None` if it cannot be read;
- `load_shader(vertex_path, fragment_path, base_path="")` – reads both
  shader stages with `read_shader_with_includes`;
- `read_shader_with_includes(path, base_dir)` – replaces every line starting
  with `#include "file"` by the contents of `base_dir + file`, recursively
  (so `base_dir` should end with a path separator); raises `OSError` if a
  file cannot be opened;
- `create_cube_geometry()` – a cube from -1 to 1 with 24 vertices, normals,
  texture coordinates, tangents and 36 indices.

## What it does not do

assetkit only describes and holds assets in memory. It does not load glTF or
other model files, upload anything to a GPU, or draw anything, and it has no
writer that turns a `Config` back into text.