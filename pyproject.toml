[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heliview"
version = "0.1.0"
description = "Software rasteriser that flies a camera around a triangle-mesh helicopter model and writes PPM frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "rasterizer", "z-buffer", "software-rendering", "mesh", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
heliview = "heliview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["heliview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
