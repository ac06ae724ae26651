[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenegraph"
version = "0.1.0"
description = "Scene graph building blocks: linked lists, node hierarchies, a work thread and 2D/3D math."
requires-python = ">=3.10"
dependencies = []
keywords = ["scenegraph", "hierarchy", "linked-list", "matrix", "quaternion", "frustum"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
