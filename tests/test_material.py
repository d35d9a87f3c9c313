import pytest
from PIL import Image

from raytracer.color import Color
from raytracer.material import (
    MaterialSolid,
    MaterialTextured,
    Phong,
    Reflectance,
    Refraction,
    Texture,
    Transmittance,
)


def _coefficients():
    return dict(
        phong=Phong(ka=0.3, kd=0.9, ks=1.0, exponent=200.0),
        reflectance=Reflectance(r=0.0),
        transmittance=Transmittance(t=0.0),
        refraction=Refraction(iof=2.3),
    )


def test_solid_material_exposes_color_and_no_texture():
    material = MaterialSolid(color=Color(0.25, 0.18, 0.5), **_coefficients())
    assert material.color == Color(0.25, 0.18, 0.5)
    assert material.texture_name == "No Texture!"
    assert material.phong.exponent == 200.0
    assert material.refraction.iof == 2.3


def test_textured_material_color_is_black():
    material = MaterialTextured(texture=Texture("wood.png"), **_coefficients())
    assert material.color == Color.BLACK
    assert material.texture_name == "wood.png"


def test_texture_load_reads_rgb_image(tmp_path):
    textures = tmp_path / "assets" / "textures"
    textures.mkdir(parents=True)
    Image.new("RGBA", (2, 1), (10, 20, 30, 255)).save(textures / "tex.png")

    texture = Texture("tex.png")
    texture.load(tmp_path)

    assert texture.data.mode == "RGB"
    assert texture.data.size == (2, 1)
    assert texture.data.getpixel((0, 0)) == (10, 20, 30)


def test_texture_load_missing_file_raises(tmp_path):
    texture = Texture("missing.png")
    with pytest.raises(FileNotFoundError):
        texture.load(tmp_path)
    assert texture.data is None


def test_texture_equality_ignores_loaded_data(tmp_path):
    textures = tmp_path / "assets" / "textures"
    textures.mkdir(parents=True)
    Image.new("RGB", (1, 1), (1, 2, 3)).save(textures / "a.png")
    loaded = Texture("a.png")
    loaded.load(tmp_path)
    assert loaded == Texture("a.png")