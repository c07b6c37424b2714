# glistscene

Building blocks for a small 3D scene graph. It is built on numpy, and uses Pillow to read images.

## What is in it

- `glistscene.quaternion`: helpers for quaternions stored as numpy arrays
  `(w, x, y, z)`. It provides `identity`, `angle_axis`, `multiply`, `slerp`,
  `to_matrix`, `rotate_vector` and `compose_matrix`, which builds
  translation × rotation × scale. Matrices are 4x4 and act on column vectors.
- `glistscene.node.Node`: a position, an orientation and a scale, with a cached
  `transformation_matrix`.
  - `move`, `set_position`, `rotate` (degrees), `rotate_quat` and `rotate_around` (radians).
  - `scale` and `set_scale`, which take one value or three.
  - `set_orientation` and `set_orientation_euler`.
  - The camera-style motions `dolly`, `truck`, `boom`, `tilt`, `pan` and `roll`.
  - `set_transformation_matrix` overrides the matrix until the next transform change.
  - Each node gets a running `id` and has a `parent` that `remove_parent` clears.
- `glistscene.camera.Camera`: a node with a separate look transform.
  - It has `rotate_look`, `reset_look`, `look_matrix` and `view_matrix()`, which is the
    inverse of the look matrix.
  - `projection_matrix(aspect)` builds a perspective projection from `fov` (60 degrees),
    `near_clip` (0.01) and `far_clip` (1000).
  - `Camera.rotate` turns the node by degrees but turns the look by the same number taken
    as radians.
- `glistscene.light`: `LightType` (`AMBIENT`, `DIRECTIONAL`, `POINT`, `SPOT`) and `Light`.
  - A light has ambient, diffuse and specular `Color`s, and `set_attenuation`.
  - For spot lights there are `set_spot_cutoff(angle, spread)` and
    `spot_outer_cutoff_angle()`.
  - `direction()` gives the facing direction, which `rotate` updates.
  - `enable` and `disable` set the `lit` flag.
- `glistscene.color.Color`: RGBA floats with `set`, `set_bytes` (0..255), `set_from` and
  `copy`.
- `glistscene.rect`: `Rect` with its edges, `width()`, `height()`, `intersects`, `contains`
  and `contains_point`. The module-level `intersects` and `contains` take eight edge values.
- `glistscene.texture`:
  - `TextureType` and `Texture`. `Texture.load` reads an image with Pillow and raises
    `OSError` if it cannot.
  - `type_name` gives the sampler name of a role, for example `"texture_diffuse"`.
  - `quad_vertices` and `sub_quad` give the six `(x, y, u, v)` rows for drawing a region.
  - `Image` is a texture that keeps its pixels in `data` until `clear_data()`.
  - `dir_name` and `file_name` split a path at its last `/` or `\`.
- `glistscene.material.Material`: the colours, `shininess`, and the diffuse, specular and
  normal maps, each with an enabled flag.
- `glistscene.vbo`: `Vertex` and `Vbo`.
  - A `Vertex` holds a position, normal, texcoords, tangent and bitangent.
  - A `Vbo` holds interleaved vertex data (14 floats per vertex) or raw vertex data, plus
    index data.
- `glistscene.mesh.Mesh`: vertices, indices, textures and a material.
  - `set_textures` assigns textures to the material maps by type.
  - `sampler_bindings()` lists the sampler name and texture unit of each texture added
    with `add_texture`.
- `glistscene.skinned_mesh.SkinnedMesh`: a mesh with a working set of animated positions
  and normals.
  - It also holds per-animation, per-frame data and, optionally, one `Vbo` per frame.
  - `set_frame_no` selects a frame, and `apply_frame()` brings the geometry to it and
    returns the buffer to draw.
- `glistscene.plane.Plane` and `glistscene.box.Box`: ready-made meshes.
  - The plane is a quad from -1 to 1 with 4 vertices and 6 indices.
  - The box is a cube with 24 vertices and 36 indices.
- `glistscene.animation`: the keyframe types `VectorKey`, `QuatKey`, `NodeAnimation` and
  `Animation`, and their samplers.
  - `interpolate_position` (linear), `interpolate_rotation` (slerp) and `find_scaling`
    (step) sample the keys.
  - `channel_transform` combines the three into a 4x4 local transform.
  - `animation_keys(frame_num)` gives evenly spaced normalised positions ending at 1.

## Install

```
pip install glistscene
```

To run the tests:

```
pip install "glistscene[test]"
pytest
```

## Example

```python
from glistscene.camera import Camera
from glistscene.rect import Rect
from glistscene.color import Color
from glistscene.animation import NodeAnimation, VectorKey, channel_transform, animation_keys

camera = Camera(0.0, 0.0, 5.0)
camera.pan(0.25)
camera.dolly(-1.0)
view = camera.view_matrix()
projection = camera.projection_matrix(16 / 9)
clip_from_world = projection @ view

a = Rect(0, 0, 10, 10)
b = Rect(5, 5, 15, 15)
assert a.intersects(b)
assert a.contains_point(3, 3)

c = Color()
c.set_bytes(255, 128, 0, 255)

arm = NodeAnimation(
    "arm",
    position_keys=[VectorKey(0.0, (0.0, 0.0, 0.0)), VectorKey(2.0, (0.0, 1.0, 0.0))],
)
local = channel_transform(arm, progress=1.0, duration=2.0)  # translation (0, 0.5, 0)
keys = animation_keys(5)  # [0.0, 0.25, 0.5, 0.75, 1.0]
```

## What it does not do

- **No drawing.** The package keeps the state and geometry that a renderer needs:
  matrices, vertex and index arrays, quad vertices and sampler names. It never talks to a
  graphics device and draws nothing itself.
- **No model files.** It does not read 3D model files.
- **No grouping of meshes with animations.** There is no class that puts a set of meshes
  together with their animations. You sample `Animation` channels with
  `channel_transform` and apply the results to your own meshes and nodes.
- **No audio, no time helpers.** It has no sound playback and no time or string utility
  functions.