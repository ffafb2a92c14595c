import pytest

from raytracer.cli import main

SCENE = """
camera = {
  resolution = { width = 1; height = 1; };
  position = { x = 0; y = 0; z = 0; };
  fieldOfView = 90;
};
primitives = { %s };
lights = {};
"""


def write(tmp_path, body=""):
    path = tmp_path / "scene.cfg"
    path.write_text(SCENE % body, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize("argv", [[], ["a.cfg", "b.cfg"]])
def test_wrong_argument_count(capsys, argv):
    assert main(argv) == 84
    assert "Usage:" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(capsys, flag):
    assert main([flag]) == 0
    out = capsys.readouterr().out
    assert "Usage: ./raytracer <SCENE_FILE>" in out
    assert "SCENE_FILE: scene configuration" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cfg")]) == 84
    assert "Error: File not found" in capsys.readouterr().err


def test_renders_scene(tmp_path, capsys):
    assert main([write(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["P3", "1 1", "255"]
    assert len(lines) == 4


def test_sphere_missing_color(tmp_path, capsys):
    body = 'spheres = ( { x = 0; y = 0; z = -3; r = 1; mat = "F"; } );'
    assert main([write(tmp_path, body)]) == 84
    assert "Setting not found: color" in capsys.readouterr().err


def test_bad_camera_value(tmp_path, capsys):
    path = tmp_path / "scene.cfg"
    path.write_text((SCENE % "").replace("fieldOfView = 90", 'fieldOfView = "wide"'), encoding="utf-8")
    assert main([str(path)]) == 84
    assert "Configuration error:" in capsys.readouterr().err