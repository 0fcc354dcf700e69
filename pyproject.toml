[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zintl"
version = "0.1.0"
description = "Unit-safe geometry, text layout, glyph atlases and mesh tessellation for a declarative UI toolkit"
requires-python = ">=3.10"
keywords = ["ui", "geometry", "text layout", "glyph atlas", "tessellation", "mesh"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zintl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
