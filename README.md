# raytracer

A small recursive ray tracer. It reads a scene from an XML file and renders
it to an RGB image. A scene has a camera, lights, spheres, and triangle meshes
read from Wavefront OBJ files. Rendering uses Phong shading, hard shadows,
mirror reflection and refraction.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
raytracer path/to/scene.xml
```

Options:

- `--base-path DIR` is the directory that holds `assets/obj_models` and
  `assets/textures`. The default is the current directory.
- `--output-dir DIR` is the directory the image is written to. The default is
  `output`. The directory must already exist.

The image gets the file name from the scene's `output_file` attribute, and
Pillow picks the format from the file extension. The command exits with
status 1 and prints a message to standard error when the scene cannot be read
or the image cannot be saved.

## Scene format

Fields can be given as attributes or as child elements with text.

```xml
<scene output_file="demo.png">
  <background_color r="0.1" g="0.1" b="0.15"/>
  <camera>
    <position x="0" y="1" z="4"/>
    <lookat x="0" y="0" z="0"/>
    <up x="0" y="1" z="0"/>
    <horizontal_fov angle="40"/>
    <resolution horizontal="320" vertical="240"/>
    <max_bounces n="4"/>
  </camera>
  <lights>
    <ambient_light><color r="0.2" g="0.2" b="0.2"/></ambient_light>
    <parallel_light>
      <color r="0.8" g="0.8" b="0.8"/>
      <direction x="-1" y="-1" z="-1"/>
    </parallel_light>
    <point_light>
      <color r="1" g="0.9" b="0.8"/>
      <position x="2" y="4" z="2"/>
    </point_light>
  </lights>
  <surfaces>
    <sphere radius="0.75">
      <position x="0" y="0" z="0"/>
      <material_solid>
        <color r="0.8" g="0.2" b="0.2"/>
        <phong ka="0.4" kd="0.8" ks="0.6" exponent="50"/>
        <reflectance r="0.25"/>
        <transmittance t="0.0"/>
        <refraction iof="1.5"/>
      </material_solid>
    </sphere>
    <mesh name="floor.obj">
      <material_solid>
        <color r="0.7" g="0.7" b="0.7"/>
        <phong ka="0.4" kd="0.7" ks="0.1" exponent="8"/>
        <reflectance r="0.0"/>
        <transmittance t="0.0"/>
        <refraction iof="1.0"/>
      </material_solid>
    </mesh>
  </surfaces>
</scene>
```

A sphere or mesh may use `<material_textured>` with a
`<texture name="..."/>` in place of `<color>`. Meshes are loaded from
`assets/obj_models/<name>` and textures from `assets/textures/<name>`, both
under the base path.

## Using the library

```python
from raytracer.scene_import import import_scene, scene_from_xml
from raytracer.render import render, generate_image

scene = import_scene("scene.xml", ".")     # loads meshes and textures too
image = render(scene)                      # a PIL.Image.Image
path = generate_image(scene, "output")     # renders and saves, returns the path
```

`scene_from_xml(text)` parses a scene from a string and leaves meshes without
geometry. There are also `point_from_xml`, `vector_from_xml`,
`color_from_xml`, `camera_from_xml`, `material_solid_from_xml` and
`sphere_from_xml` for single elements. Parsing failures raise
`raytracer.scene_import.SceneImportError`.

`raytracer.obj_parser.read_obj_file(path)` and `parse_obj(lines)` read OBJ
data into an `ObjModel`. `ObjModel.to_triangles()` turns it into a list of
`Triangle` objects.

## What it does not do

- Spot lights are read from the scene but add nothing to the shading.
- Texture images are loaded, but textured materials shade as black. Texture
  coordinates are not used.
- OBJ faces must be triangles. Other faces are skipped and a warning is
  logged. A face uses the normal of its first corner. When the file has no
  normals, the normal is computed from the vertices.
- There is no interactive viewer or file picker. The scene path is given on
  the command line.