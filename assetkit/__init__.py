"""Asset handles, an asset registry with defaults, loaders and a JSON-like config format for 3D rendering assets."""

__version__ = "0.1.0"