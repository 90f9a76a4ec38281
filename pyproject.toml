[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chisel"
version = "0.1.0"
description = "Geometry, math and engine-core utilities for a 3D level editor: planes, rays, windings, cameras, colours, vertex layouts and render state descriptions."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "geometry", "level-editor", "math", "camera", "winding", "color"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chisel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
