[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glengine"
version = "0.1.0"
description = "A minimal OpenGL engine skeleton: window, keyboard input, scene clearing and 4x4 matrix helpers"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["opengl", "graphics", "engine", "matrix", "rendering", "pyglet"]
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
glengine = "glengine.system:main"

[tool.hatch.build.targets.wheel]
packages = ["glengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
