[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowerkit"
version = "0.1.0"
description = "Small 3D math, mesh, scene and model-import toolkit for real-time rendering experiments"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "3d",
    "graphics",
    "rendering",
    "vector",
    "matrix",
    "quaternion",
    "mesh",
    "model",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flowerkit"]

[tool.pytest.ini_options]
addopts = "-ra"
