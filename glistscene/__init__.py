"""Scene graph building blocks: nodes, cameras, lights, textures, meshes and keyframe animation sampling."""

__version__ = "0.1.0"