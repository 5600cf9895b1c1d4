[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "the_cube"
version = "0.1.0"
description = "A rotating wireframe cube: small 4x4 linear algebra, a perspective camera and a renderer-agnostic scene."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "cube", "wireframe", "projection", "linear-algebra", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["the_cube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
