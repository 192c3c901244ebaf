"""Command that loads a set of asset descriptions and reports what was loaded."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .assets import Geometry, Material, Mesh, Shader, Texture
from .handle import AssetHandle
from .parser import load_config


def _describe(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def _run(assets_dir: Path) -> None:
    print("Loading Shader...")
    shader = Shader()
    shader.deserialize(load_config(assets_dir / "shader.json"))

    texture_config = load_config(assets_dir / "texture.json")
    print("Loading Texture...")
    texture = Texture()
    texture.deserialize(texture_config)

    geometry_config = load_config(assets_dir / "geometry.json")
    print("Loading Geometry...")
    geometry = Geometry()
    geometry.deserialize(geometry_config)

    material_config = load_config(assets_dir / "material.json")
    print("Loading Material...")
    material = Material()
    material.deserialize(material_config)

    print("Creating Mesh...")
    mesh = Mesh(geometry_id=AssetHandle(1), material_id=AssetHandle(2))

    print("\n--- Loaded Assets ---")
    print(f"Shader vertex path: {shader.vertex_path}")
    print(f"Texture size: {texture.width}x{texture.height}, channels: {texture.channels}")
    print(
        f"Geometry vertices: {len(geometry.positions) // 3} "
        "(assuming 3 floats per position)"
    )
    print(f"Material metallic: {material.metallic:g}, roughness: {material.roughness:g}")
    print(
        f"Mesh links Geometry ID: {mesh.geometry_id.id}, "
        f"Material ID: {mesh.material_id.id}"
    )


def main(argv: list[str] | None = None) -> int:
    """Load shader, texture, geometry and material descriptions and print a summary."""
    parser = argparse.ArgumentParser(
        prog="assetkit", description="Load asset descriptions and report on them."
    )
    parser.add_argument(
        "assets_dir",
        nargs="?",
        default="assets",
        help="directory holding shader.json, texture.json, geometry.json and material.json",
    )
    args = parser.parse_args(argv)

    try:
        _run(Path(args.assets_dir))
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"Fatal error: {_describe(exc)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())