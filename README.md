# meshgrapher

Draws wireframe 3D surfaces in a pygame window. A square of the (x, z) plane is
divided into a grid of cells. Every grid point is raised to the height `y = f(x, z)`,
and the result is shown through a perspective camera that you move with the keyboard.

## Scenes

- **graph**: the surface `sin(r) / r` above a floor grid.
- **melting-graph**: the surface `sin(x) * cos(z)` above a floor grid. Each frame its
  heights are multiplied by 0.9995, so it sinks slowly toward the floor.
- **wave-equation**: a 256 × 256 finite-difference simulation of the wave equation.
  The edges are held at zero and every step is damped. On each step there is a
  2% chance that a random 4 × 4 block is raised, and the ripples spread out from it.

## Installation

```
pip install .
```

This needs `numpy` and `pygame`.

## Running

```
meshgrapher graph
meshgrapher melting-graph
meshgrapher wave-equation
```

The window opens at 800 × 600 and can be resized.

### Controls

| Key              | Action                                   |
|------------------|------------------------------------------|
| W / Up arrow     | tilt the scene one way about the x axis  |
| S / Down arrow   | tilt it the other way                    |
| D / Right arrow  | turn the scene one way about the y axis  |
| A / Left arrow   | turn it the other way                    |
| Z                | move the camera toward its target        |
| X                | move the camera away from its target     |
| Escape           | quit                                     |

Camera speed is scaled by the running frame rate, so the camera moves at about the
same pace on fast and slow machines. The program logs the frame rate once a second
at INFO level. The command line sets logging to WARNING, so this line is not shown
by default.

## Using the library

Build a tessellation, apply a function to it, and get mesh data back:

```python
import math
from meshgrapher.graph import UnitSquareTesselation, shift_scale_input, shift_scale_output

f = lambda x, z: math.sin(x) * math.cos(z)
f = shift_scale_input(f, 0.5, 8.0, 0.5, 8.0)   # f((x - 0.5) * 8, (z - 0.5) * 8)
f = shift_scale_output(f, 0.55, 0.5)           # f(x, z) * 0.5 + 0.55

mesh = (
    UnitSquareTesselation.generate(64, 2.0)     # 64 x 64 cells over [0, 2] x [0, 2]
    .apply_function(f)
    .mesh_data(UnitSquareTesselation.FUNCT_COLOR)
)
print(len(mesh.vertices), len(mesh.indices))    # 4225 49152
```

Each cell adds four triangles: two that face up and two that face down. With vertex
indices kept to 16 bits, a grid can have at most 255 subdivisions per side.

You can also run the wave-equation solver on its own. Its field is the numpy array
`u_0`:

```python
import numpy as np
from meshgrapher.wave_eqn import WaveEquationData

wave = WaveEquationData(rng=np.random.default_rng(0))
for _ in range(100):
    wave.update()
print(wave.u_0.shape)  # (256, 256)
```

Other building blocks:

- `meshgrapher.scenes`: `graph_scene()`, `melting_graph_scene()`, `wave_eqn_scene()`,
  `test_scene()` and `build_scene(pairs)`, which takes `(MeshData, MatrixUniform)` pairs.
- `meshgrapher.matrix`: `MatrixUniform`, `look_at_rh`, `perspective` and `axis_angle`.
- `meshgrapher.camera`: `Camera`, `CameraController`, `CameraState` and the `Key` enum.
- `meshgrapher.render`: `RenderState`, `project_vertices`, `visible_triangles`, and
  `render(state, scene, surface)`, which draws onto any pygame surface and returns the
  number of triangles drawn.

## Limitations

Drawing is done in software with `pygame.draw.line`. There is no depth buffer and no
filled shading. Only the edges of front-facing triangles are drawn, and a triangle
with a vertex outside the depth range is left out. Large grids such as the
wave-equation scene therefore draw slowly.

## Tests

```
pip install .[test]
pytest
```