# discoscene

A small real-time 3D scene: three textured models (a character, a bucket and
a floor) are lit by three coloured spotlights, red, green and blue, that sweep
around the vertical axis like lights on a dance floor. Rendering uses OpenGL
3.3 through pyglet; textures are read with Pillow.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
discoscene
```

By default the scene's files are looked for under `resources/` in the
working directory. Another directory can be given:

```
discoscene --resources path/to/resources
```

The directory must hold:

```
shaders/default.vert
shaders/default.frag
meshes/Amy.obj      meshes/Amy.png
meshes/bucket.obj   meshes/bucket.jpg
meshes/floor.obj    meshes/floor.jpg
```

The window opens at 1024 x 576 and cannot be resized. The camera sits at
(0, 100, 180) looking at (0, 80, 0) with a 60° field of view. If anything
fails (a missing mesh, no OpenGL context), the error message is printed and
the command exits with status -1.

### Keys

| Key   | Action                                                         |
|-------|----------------------------------------------------------------|
| `B`   | Turn wireframe debug mode on or off                            |
| `P`   | Save the current frame as a plain-text PPM (`P3`) image        |
| `Esc` | Close the window                                               |

Captured frames are numbered from zero: `Assignment0-ss0.ppm`,
`Assignment0-ss1.ppm`, and so on, written to the working directory.

## Using the pieces

The modules can also be used on their own:

- `discoscene.color.Color`: a frozen RGBA colour whose alpha defaults to 1;
  `as_rgb()` drops the alpha.
- `discoscene.camera`: `perspective` and `look_at_matrix` build 4x4
  matrices indexed `[row, column]`; `Camera` has `look_at`, `move_to` and
  `apply`, which sends `view` and `projection` to a shader program.
- `discoscene.lighting`: `Light` and `SpotLight`. Every spotlight created
  takes the next number, counting from 1, and its uniforms are named
  `spotlight<Name><number>`, for example `spotlightLightPos1` and
  `spotlightCutoff1`. `rotate_y(theta)` turns the original beam direction
  by `theta` radians about the Y axis.
- `discoscene.mesh`: `load_obj` reads a Wavefront OBJ file into an
  `ObjModel`, splitting polygons into triangle fans. `Mesh` turns it into
  interleaved position/normal/texcoord data; every face corner must have
  all three. A file that cannot be read or used raises `MeshLoadError`.
  `gl_init()` uploads the data and loads the texture once a GL context
  is current.
- `discoscene.entity`: `Entity.model_matrix()` combines translation,
  rotation (angle in degrees) and uniform scale. `Amy`, `Bucket` and
  `Floor` each draw one mesh.
- `discoscene.capture`: `format_ppm` turns bottom-up RGB pixel rows into
  P3 text (raising `ValueError` when the byte count does not match), and
  `PPMCapture` saves the frame buffer.
- `discoscene.input.InputHandler`: maps keys to callbacks for a pyglet
  window. A holdable key fires on every `process_input()` while down; any
  other key fires once per press.
- `discoscene.shader.ShaderProgram`, `discoscene.buffers` (`VBO`, `EBO`,
  `Texture`, `VAO`), `discoscene.debug.DebugFilter` and
  `discoscene.window.Window` wrap the OpenGL state they are named for.

## What it does not do

The package ships no shaders, models or textures: the `discoscene` command
only renders the files it finds in the resources directory. The camera is
fixed, and there are no controls beyond the three keys above.