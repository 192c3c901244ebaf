[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assetkit"
version = "0.1.0"
description = "Typed asset handles, an asset registry with fallback defaults, and a small JSON-like config format for 3D rendering assets"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "assets",
    "rendering",
    "3d",
    "geometry",
    "material",
    "shader",
    "texture",
    "config",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
assetkit = "assetkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["assetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
