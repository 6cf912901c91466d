[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfmap"
version = "0.1.0"
description = "Parse FdF height maps: grids of integer heights laid out as space-separated rows."
requires-python = ">=3.10"
dependencies = []
keywords = ["fdf", "heightmap", "wireframe", "parser", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdfmap = "fdfmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fdfmap"]

[tool.pytest.ini_options]
addopts = "-ra"
