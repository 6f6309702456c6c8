# flowerkit

A compact toolkit for experimenting with real-time 3D rendering in plain
Python. It needs nothing beyond the standard library.

## What is in it

- **Math** (`flowerkit.vector`, `flowerkit.matrix`): the immutable types
  `Vector2`, `Vector3`, `Vector4` (also readable as `r`, `g`, `b`, `a`),
  `Quaternion` and a row-major `Matrix4`. The matrix has constructors
  `identity`, `zero`, `translation`, `rotation_x`, `rotation_y`,
  `rotation_z`, `rotation_axis`, `rotation_quaternion` and `scaling`. Its
  elements can be read by flat index or by `(row, column)`. The helpers are
  `clamp`, `lerp`, `sqr`, `dot`, `cross`, `magnitude`, `magnitude_sqr`,
  `distance`, `distance_sqr`, `normalize`, `transpose`, `transform_coord` and
  `transform_normal`. The module also defines the constants `PI`, `HALF_PI`,
  `TWO_PI`, `DEG_TO_RAD` and `RAD_TO_DEG`.
- **Colors** (`flowerkit.colors`): the standard named palette as RGBA
  `Vector4` values in `NAMED_COLORS`. `color_by_name` looks a color up and
  ignores case, spaces and underscores. An unknown name raises `KeyError`.
- **Vertices and meshes** (`flowerkit.vertex_types`):
  - the vertex layouts `VertexP`, `VertexPC`, `VertexPX` and `Vertex`;
  - the `VertexElement` flags, with each layout's flags in its `FORMAT`;
  - a `Mesh` container that reports its `vertex_format()` and its
    `triangle_count()`.
- **Scene data** (`flowerkit.scene`): `Material`, `DirectionalLight`,
  `Transform` and `Model`. `Transform.matrix()` scales, then rotates, then
  translates. A `Model` holds lists of `MeshData` and `MaterialData`.
- **Demo content**:
  - `flowerkit.shapes` holds colored shapes (`triangle`, `square`, `star`,
    `fish`, `diamond`, `cube`). It also has left/right navigation between the
    star, fish and diamond through `next_shape` and `Key`, and a rotating
    `CubeSpin`.
  - `flowerkit.mesh_states` holds the mesh viewer states (`MeshState`). Number
    keys 1 to 7 switch between them through `state_for_key`. For each state,
    `mesh_state_spec` gives a `MeshStateSpec`: the name of the mesh builder and
    its arguments, the vertex layout, the shader path and the optional texture.
  - `flowerkit.debug_draw` holds the debug shape types (`DebugDrawType`) and
    their names (`draw_type_names`). `DebugDrawSettings` holds their
    parameters, and its `editable_fields` lists which parameters each type
    uses.
  - `flowerkit.solar_system` holds the bodies (`Body`) with their distances,
    speeds, sizes and texture paths. `create_solar_system` builds one `Planet`
    for each body. `Planet.update` advances spin and orbit, and
    `Planet.world_view_projection` combines the world matrix with a view and a
    projection. `render_target_eye` gives a close-up camera position.
- **Model import helpers** (`flowerkit.importer`):
  - argument parsing with `parse_args`, which returns an `Arguments`;
  - the conversions `to_vector3`, `to_tex_coord` and `to_color`;
  - naming of textures with `embedded_texture_name`;
  - writing of embedded textures with `export_embedded_texture` and
    `EmbeddedTexture`.

## Examples

Vector math:

```python
from flowerkit.vector import Vector3, cross, dot, normalize

x = Vector3(1.0, 0.0, 0.0)
y = Vector3(0.0, 1.0, 0.0)
z = cross(x, y)            # Vector3(0.0, 0.0, 1.0)
assert dot(z, x) == 0.0
n = normalize(Vector3(3.0, 0.0, 4.0))   # Vector3(0.6, 0.0, 0.8)
```

Matrices use the row-vector convention, so transforms compose from left to
right:

```python
import math
from flowerkit.matrix import Matrix4, transform_coord
from flowerkit.vector import Vector3

world = Matrix4.rotation_y(math.pi / 2) * Matrix4.translation(Vector3(0.0, 0.0, 10.0))
point = transform_coord(Vector3(1.0, 0.0, 0.0), world)
```

Stepping a solar system:

```python
from flowerkit.solar_system import Body, create_solar_system

planets = create_solar_system()
for planet in planets:
    planet.update(1.0 / 60.0)
earth_position = planets[Body.EARTH].position()
```

Parsing model-importer arguments, given without the program name:

```python
from flowerkit.importer import parse_args

args = parse_args(["-scale", "0.01", "hero.fbx", "hero.model"])
# args.input_file_name == Path("hero.fbx"), args.scale == 0.01
```

`parse_args` raises `ValueError` when fewer than two arguments are given.

## What it does not do

flowerkit only describes and computes. It does not:

- open a window;
- talk to a GPU;
- compile shaders;
- load images;
- draw anything.

It has no mesh builders. The builder names in `MeshStateSpec` are labels only.
It cannot read or write model files either. The importer module gives the
argument parsing, the conversions and the embedded-texture handling, but
nothing that loads a scene from an FBX or other model file. It installs no
command-line program.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.