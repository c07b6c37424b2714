[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glistscene"
version = "0.1.0"
description = "Scene graph building blocks: nodes, cameras, lights, meshes, textures and keyframe animation sampling"
requires-python = ">=3.10"
keywords = ["3d", "scene-graph", "camera", "mesh", "animation", "quaternion", "texture"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glistscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
