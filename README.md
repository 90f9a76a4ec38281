# chisel

Core utilities for a 3D level editor: vector math, bounding boxes, planes,
rays, polygon windings, cameras, colours, transforms, vertex layouts,
meshes, blend states and texture formats, together with small helpers for
bits, hashing, flags, text parsing, events, systems, timing and files.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

### Planes and windings

```python
from chisel.vectors import vec3
from chisel.plane import Plane
from chisel.winding import Winding

floor = Plane(vec3(0, 0, 1), 0.0)
print(floor.signed_distance(vec3(0, 0, 5)))   # 5.0

# A huge quad lying in the plane, clipped to the front side of another plane
quad = Winding.from_plane(floor)
wall = Plane(vec3(1, 0, 0), 0.0)
clipped = quad.clip(wall)    # a new Winding, this one, or None
print(len(clipped))          # 4
```

`Winding.clip` returns the winding itself when nothing lies behind the
plane, `None` when nothing lies in front of it, and otherwise a new winding.
It raises `ValueError` when `max_points` leaves no room for the result.

### Rays and boxes

```python
from chisel.vectors import vec3
from chisel.bounds import AABB
from chisel.ray import Ray

box = AABB(vec3(-1, -1, -1), vec3(1, 1, 1))
ray = Ray(vec3(-5, 0.1, 0.1), vec3(1, 0, 0))
print(ray.intersects_box(box))                  # True
print(box.extend(vec3(3, 0, 0)).dimensions())   # [4. 2. 2.]
```

### Cameras and transforms

```python
from chisel.camera import Camera
from chisel.transform import Transform

camera = Camera(screen_size=(1280, 720))
view = camera.view_matrix()
proj = camera.proj_matrix()
frustum = camera.create_frustum()
print(Camera.calc_vertical_fov(90.0, 1.0))      # 90.0

t = Transform()
t.set_euler_angles((0, 0, 90))
print(t.get_euler_angles())                     # [ 0.  0. 90.]
```

### Colours

```python
from chisel.color import Color, Colors

red = Color.hsv(0, 1, 1)
print(hex(red.pack()))           # 0xff0000ff
print(Colors.WHITE.to_vec4())    # [1. 1. 1. 1.]
```

`Color255` holds byte components in 0..255 and raises `ValueError` for
values outside that range.

### Bit helpers and hashing

```python
from chisel.bits import popcnt, iter_bits, Bitset
from chisel.hashing import hash_string, HashedString

print(popcnt(0b1011))             # 3
print(list(iter_bits(0b1010)))    # [1, 3]

bits = Bitset(40)
bits.set(33, True)
print(bits[33])                   # True

print(hash_string("worldspawn"))
print(HashedString("func_detail") == "func_detail")   # True
```

### Events and systems

```python
from chisel.events import Event
from chisel.systems import System, SystemGroup

changed = Event()
changed += lambda value: print("changed to", value)
changed(42)

class Spinner(System):
    def update(self):
        print("spinning")

group = SystemGroup()
group.add_system(Spinner)
group.start()
group.update()
```

### Vertex layouts and meshes

```python
import struct

from chisel.vertex import VertexLayout, ScalarType, AttributeMode
from chisel.mesh import MeshBuffer

layout = VertexLayout()
layout.add_of(ScalarType.FLOAT32, 3, AttributeMode.POSITION)
layout.add_of(ScalarType.FLOAT32, 2, AttributeMode.TEX_COORD)
print(layout.stride())           # 20

mesh = MeshBuffer(layout)
for x, y in [(0, 0), (1, 0), (0, 1)]:
    mesh.vertices += struct.pack("<5f", x, y, 0, x, y)
mesh.indices += [0, 1, 2]
group = mesh.add_group(material=0)
print(group.vertices.count, group.indices.count)   # 3 3
```

## Modules

- `chisel.bits` – alignment, bit counting, `BitPacker`/`BitUnpacker`, fixed `Bitset` and growable `BitVector`
- `chisel.hashing` – 32-bit FNV-1a string hashing and `HashedString`
- `chisel.enumset` – `EnumSet` (index-based) and `Flags` (bitmask-based)
- `chisel.text` – case conversion, trimming, splitting, replacing and `sprintf`
- `chisel.parse` – a `TextCursor` for numbers and delimited tokens, raising `ParseError`
- `chisel.events` – multicast `Event` with one-shot listeners
- `chisel.systems` – `System` and `SystemGroup`
- `chisel.timing` – frame and fixed-tick `Time`
- `chisel.files` – reading, writing and copying files
- `chisel.vectors`, `chisel.bounds`, `chisel.plane`, `chisel.ray`, `chisel.winding` – geometry
- `chisel.color` – `Color`, `Color255`, `Colors`, sRGB conversion
- `chisel.transform`, `chisel.camera` – quaternions, transforms and a perspective camera
- `chisel.vertex`, `chisel.mesh` – vertex layouts, CPU-side vertex/index buffers and meshes
- `chisel.blending`, `chisel.texture_format` – blend state and texture format descriptions

## What this package does not do

It does not render anything and talks to no graphics device. Vertex and
index buffers hold their data in memory; their `handle` attribute is left
for the caller's renderer, and `Mesh.uploaded` is only a flag. Blend states
and texture formats are plain descriptions. The camera takes its aspect
ratio from a `render_target` with a `size`, or from `screen_size`; it opens
no window. There is no editor interface, map file loading or command-line
tool.