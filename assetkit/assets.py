"""Asset types: textures, shaders, geometry, materials and meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .config import Config, ConfigValue, Serializable, ValueKind
from .handle import AssetHandle

_UINT32_MASK = 0xFFFFFFFF


def _uint(value: int) -> ConfigValue:
    return ConfigValue(value & _UINT32_MASK, ValueKind.UINT32)


def _floats(values: list[float]) -> ConfigValue:
    return ConfigValue(list(values), ValueKind.FLOAT_LIST)


def _optional_indices(config: Config, key: str) -> list[int] | None:
    values = config.get_optional(key, ValueKind.UINT32_LIST)
    if values is not None:
        return values
    floats = config.get_optional(key, ValueKind.FLOAT_LIST)
    if floats is None:
        return None
    indices = []
    for value in floats:
        if value < 0 or not float(value).is_integer():
            raise ValueError(f"{key} must hold non-negative whole numbers, got {value}")
        indices.append(int(value))
    return indices


class TextureFormat(IntEnum):
    """Pixel layout of a texture."""

    UNKNOWN = 0
    RGBA8 = 1
    RGB8 = 2
    GRAY8 = 3


@dataclass
class Texture(Serializable):
    """Image data together with its dimensions and pixel format."""

    name: str = ""
    width: int = 0
    height: int = 0
    channels: int = 0
    format: TextureFormat = TextureFormat.UNKNOWN
    data: bytes = b""

    def serialize(self, out: Config) -> None:
        out.set("width", _uint(self.width))
        out.set("height", _uint(self.height))
        out.set("channels", _uint(self.channels))
        out.set("format", _uint(int(self.format)))

    def deserialize(self, config: Config) -> None:
        """Read whichever of width, height, channels and format are present."""
        width = config.get_optional("width", ValueKind.UINT32)
        height = config.get_optional("height", ValueKind.UINT32)
        channels = config.get_optional("channels", ValueKind.UINT32)
        fmt = config.get_optional("format", ValueKind.UINT32)
        texture_format = TextureFormat(fmt) if fmt is not None else None

        if width is not None:
            self.width = width
        if height is not None:
            self.height = height
        if channels is not None:
            self.channels = channels
        if texture_format is not None:
            self.format = texture_format


@dataclass
class Shader(Serializable):
    """A vertex/fragment shader pair, by path and optionally by source text."""

    vertex_path: str = ""
    fragment_path: str = ""
    vertex_source: str = ""
    fragment_source: str = ""

    def serialize(self, out: Config) -> None:
        out.set("vertexPath", ConfigValue(self.vertex_path, ValueKind.STRING))
        out.set("fragmentPath", ConfigValue(self.fragment_path, ValueKind.STRING))
        out.set("vertexSource", ConfigValue(self.vertex_source, ValueKind.STRING))
        out.set("fragmentSource", ConfigValue(self.fragment_source, ValueKind.STRING))

    def deserialize(self, config: Config) -> None:
        self.vertex_path = config.get("vertexPath", ValueKind.STRING)
        self.fragment_path = config.get("fragmentPath", ValueKind.STRING)
        vertex_source = config.get_optional("vertexSource", ValueKind.STRING)
        if vertex_source is not None:
            self.vertex_source = vertex_source
        fragment_source = config.get_optional("fragmentSource", ValueKind.STRING)
        if fragment_source is not None:
            self.fragment_source = fragment_source


@dataclass
class Geometry(Serializable):
    """Vertex attribute streams and triangle indices."""

    positions: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    tex_coords: list[float] = field(default_factory=list)
    tangents: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def serialize(self, out: Config) -> None:
        out.set("positions", _floats(self.positions))
        out.set("normals", _floats(self.normals))
        out.set("texCoords", _floats(self.tex_coords))
        out.set("tangents", _floats(self.tangents))
        out.set("indices", ConfigValue(list(self.indices), ValueKind.UINT32_LIST))

    def deserialize(self, config: Config) -> None:
        """Read whichever attribute streams are present."""
        streams = {
            name: config.get_optional(key, ValueKind.FLOAT_LIST)
            for name, key in (
                ("positions", "positions"),
                ("normals", "normals"),
                ("tex_coords", "texCoords"),
                ("tangents", "tangents"),
            )
        }
        indices = _optional_indices(config, "indices")

        for name, values in streams.items():
            if values is not None:
                setattr(self, name, values)
        if indices is not None:
            self.indices = indices


@dataclass
class Material(Serializable):
    """Surface parameters and the shader and textures used to draw them."""

    shader_id: AssetHandle = field(default_factory=AssetHandle)
    base_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    metallic: float = 0.0
    roughness: float = 0.0
    albedo_texture_id: AssetHandle = field(default_factory=AssetHandle)
    normal_texture_id: AssetHandle = field(default_factory=AssetHandle)
    metallic_roughness_texture_id: AssetHandle = field(default_factory=AssetHandle)

    def serialize(self, out: Config) -> None:
        out.set("shaderId", _uint(self.shader_id.id))
        out.set("baseColor", _floats(list(self.base_color)))
        out.set("metallic", ConfigValue(self.metallic, ValueKind.FLOAT))
        out.set("roughness", ConfigValue(self.roughness, ValueKind.FLOAT))
        out.set("albedoTextureId", _uint(self.albedo_texture_id.id))
        out.set("normalTextureId", _uint(self.normal_texture_id.id))
        out.set("metallicRoughnessTextureId", _uint(self.metallic_roughness_texture_id.id))

    def deserialize(self, config: Config) -> None:
        shader_id = AssetHandle(config.get("shaderId", ValueKind.UINT32))
        base_color = config.get("baseColor", ValueKind.FLOAT_LIST)
        if len(base_color) != 4:
            raise ValueError("baseColor must have exactly 4 floats!")
        metallic = config.get("metallic", ValueKind.FLOAT)
        roughness = config.get("roughness", ValueKind.FLOAT)
        albedo = AssetHandle(config.get("albedoTextureId", ValueKind.UINT32))
        normal = AssetHandle(config.get("normalTextureId", ValueKind.UINT32))
        metallic_roughness = AssetHandle(
            config.get("metallicRoughnessTextureId", ValueKind.UINT32)
        )

        self.shader_id = shader_id
        self.base_color = tuple(base_color)
        self.metallic = metallic
        self.roughness = roughness
        self.albedo_texture_id = albedo
        self.normal_texture_id = normal
        self.metallic_roughness_texture_id = metallic_roughness


@dataclass
class Mesh(Serializable):
    """Links a geometry to the material it is drawn with."""

    geometry_id: AssetHandle = field(default_factory=AssetHandle)
    material_id: AssetHandle = field(default_factory=AssetHandle)

    def serialize(self, out: Config) -> None:
        out.set("geometryId", _uint(self.geometry_id.id))
        out.set("materialId", _uint(self.material_id.id))

    def deserialize(self, config: Config) -> None:
        geometry_id = AssetHandle(config.get("geometryId", ValueKind.UINT32))
        material_id = AssetHandle(config.get("materialId", ValueKind.UINT32))
        self.geometry_id = geometry_id
        self.material_id = material_id