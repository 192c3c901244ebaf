"""Registry of loaded assets addressed by typed handles, with fallback defaults."""

from __future__ import annotations

from itertools import count
from typing import Generic, TypeVar

from .assets import Geometry, Material, Mesh, Shader, Texture, TextureFormat
from .handle import AssetHandle
from .loader import load_shader

T = TypeVar("T")

DEFAULT_VERTEX_SHADER = "assets/shaders/brdf/vertex.glsl"
DEFAULT_FRAGMENT_SHADER = "assets/shaders/brdf/fragment.glsl"


def create_default_quad_geometry() -> Geometry:
    """A single quad in the z=0 plane facing +z."""
    return Geometry(
        positions=[-1.0, -1.0, 0.0, 1.0, -1.0, 0.0, 1.0, 1.0, 0.0, -1.0, 1.0, 0.0],
        tex_coords=[0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0],
        normals=[0.0, 0.0, 1.0] * 4,
        tangents=[1.0, 0.0, 0.0, 1.0] * 4,
        indices=[0, 1, 2, 2, 3, 0],
    )


def create_default_texture() -> Texture:
    """A 2x2 opaque black RGBA8 texture."""
    return Texture(
        name="default_texture",
        width=2,
        height=2,
        channels=4,
        format=TextureFormat.RGBA8,
        data=bytes([0, 0, 0, 255]) * 4,
    )


def create_default_material(texture: AssetHandle) -> Material:
    """A material using one texture for albedo, normal and metallic-roughness."""
    return Material(
        albedo_texture_id=texture,
        metallic_roughness_texture_id=texture,
        normal_texture_id=texture,
    )


def create_default_mesh(geometry: AssetHandle, material: AssetHandle) -> Mesh:
    """A mesh linking the given geometry and material."""
    return Mesh(geometry_id=geometry, material_id=material)


class _Registry(Generic[T]):
    """Assets of one kind keyed by handle, with ids handed out from 1."""

    def __init__(self, kind: str) -> None:
        self._kind = kind
        self._items: dict[AssetHandle, T] = {}
        self._ids = count(1)
        self.default: AssetHandle = AssetHandle()

    def register(self, item: T) -> AssetHandle:
        handle: AssetHandle = AssetHandle(next(self._ids))
        self._items[handle] = item
        return handle

    def get(self, handle: AssetHandle) -> T:
        if handle in self._items:
            return self._items[handle]
        if self.default in self._items:
            return self._items[self.default]
        raise KeyError(f"no {self._kind} registered for handle {handle.id} and no default")


class AssetManager:
    """Holds geometries, textures, materials, meshes and shaders by handle.

    Looking up an unknown handle returns the default asset of that kind.
    """

    def __init__(self) -> None:
        self._geometries: _Registry[Geometry] = _Registry("geometry")
        self._textures: _Registry[Texture] = _Registry("texture")
        self._materials: _Registry[Material] = _Registry("material")
        self._meshes: _Registry[Mesh] = _Registry("mesh")
        self._shaders: _Registry[Shader] = _Registry("shader")

    @property
    def default_geometry(self) -> AssetHandle:
        return self._geometries.default

    @property
    def default_texture(self) -> AssetHandle:
        return self._textures.default

    @property
    def default_material(self) -> AssetHandle:
        return self._materials.default

    @property
    def default_mesh(self) -> AssetHandle:
        return self._meshes.default

    @property
    def default_shader(self) -> AssetHandle:
        return self._shaders.default

    def register_geometry(self, geometry: Geometry) -> AssetHandle:
        return self._geometries.register(geometry)

    def register_texture(self, texture: Texture) -> AssetHandle:
        return self._textures.register(texture)

    def register_material(self, material: Material) -> AssetHandle:
        return self._materials.register(material)

    def register_mesh(self, mesh: Mesh) -> AssetHandle:
        return self._meshes.register(mesh)

    def register_shader(self, shader: Shader) -> AssetHandle:
        return self._shaders.register(shader)

    def get_geometry(self, handle: AssetHandle) -> Geometry:
        return self._geometries.get(handle)

    def get_texture(self, handle: AssetHandle) -> Texture:
        return self._textures.get(handle)

    def get_material(self, handle: AssetHandle) -> Material:
        return self._materials.get(handle)

    def get_mesh(self, handle: AssetHandle) -> Mesh:
        return self._meshes.get(handle)

    def get_shader(self, handle: AssetHandle) -> Shader:
        return self._shaders.get(handle)

    def initialize_defaults(self) -> None:
        """Register the fallback quad, texture, shader, material and mesh."""
        self._geometries.default = self.register_geometry(create_default_quad_geometry())
        self._textures.default = self.register_texture(create_default_texture())

        shader = load_shader(DEFAULT_VERTEX_SHADER, DEFAULT_FRAGMENT_SHADER)
        self._shaders.default = self.register_shader(shader)

        material = create_default_material(self._textures.default)
        material.shader_id = self._shaders.default
        self._materials.default = self.register_material(material)

        mesh = create_default_mesh(self._geometries.default, self._materials.default)
        self._meshes.default = self.register_mesh(mesh)