[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cube3d"
version = "0.1.0"
description = "A small textured raycasting maze explorer that loads .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "xpm", "pygame", "first-person"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cube3d = "cube3d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cube3d"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
