import pytest

from raytracer.sceneconfig import (
    ConfigError,
    SettingNotFoundError,
    load_config,
    lookup,
    parse_config,
)

SAMPLE = """
# hash comment
// slash comment
/* block
   comment */
name = "scene";
version : 2;
camera = {
  fov = 72.5;
  enabled = TRUE;
  mask = 0xFF;
  big = 5L;
};
tags = [ "a", "b" ];
items = ( 1, "two", { k = 3; } );
"""


@pytest.fixture
def config():
    return parse_config(SAMPLE)


def test_scalars(config):
    assert config["name"] == "scene"
    assert config["version"] == 2
    assert config["camera"]["fov"] == 72.5
    assert config["camera"]["enabled"] is True
    assert config["camera"]["mask"] == 0xFF
    assert config["camera"]["big"] == 5


def test_setting_order_is_kept(config):
    assert list(config) == ["name", "version", "camera", "tags", "items"]


def test_array_and_list(config):
    assert config["tags"] == ["a", "b"]
    assert config["items"] == [1, "two", {"k": 3}]


def test_adjacent_strings_are_joined():
    assert parse_config('s = "ab" "cd";')["s"] == "abcd"


def test_escapes():
    assert parse_config(r's = "a\tb\"c\\";')["s"] == "a\tb\"c\\"


def test_signed_numbers():
    cfg = parse_config("n = -4; e = 1e3; h = -0x10; f = .5;")
    assert cfg == {"n": -4, "e": 1e3, "h": -0x10, "f": .5}


def test_separators_are_optional():
    assert parse_config("a = 1 b = 2, c = false") == {"a": 1, "b": 2, "c": False}


def test_empty_containers():
    assert parse_config("g = {}; l = (); a = [];") == {"g": {}, "l": [], "a": []}


def test_trailing_comma_in_list():
    assert parse_config("l = (1, 2,);")["l"] == [1, 2]


@pytest.mark.parametrize(
    "text",
    [
        "a = ;",
        "a = 1; a = 2;",
        'a = [1, "x"];',
        "a = [ { b = 1; } ];",
        "a = { b = 1;",
        'a = "open;',
        "= 3;",
        "a = (1 2);",
        "a = @x;",
        "a",
    ],
)
def test_syntax_errors(text):
    with pytest.raises(ConfigError):
        parse_config(text)


def test_error_reports_line():
    with pytest.raises(ConfigError) as info:
        parse_config("a = 1;\nb = ;")
    assert info.value.line == 2


def test_lookup_nested(config):
    assert lookup(config, "camera.fov") == 72.5
    assert lookup(config, "items.[2].k") == 3
    assert lookup(config, "tags.[1]") == "b"


def test_lookup_index_on_group(config):
    assert lookup(config, "camera.[0]") == 72.5


@pytest.mark.parametrize("path", ["missing", "camera.nope", "tags.[5]", "name.sub", "version.[0]"])
def test_lookup_missing(config, path):
    with pytest.raises(SettingNotFoundError) as info:
        lookup(config, path)
    assert info.value.path == path


def test_setting_not_found_is_config_error(config):
    with pytest.raises(ConfigError):
        lookup(config, "absent")


def test_load_config(tmp_path):
    path = tmp_path / "scene.cfg"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.cfg")


def test_load_config_bad_encoding(tmp_path):
    path = tmp_path / "scene.cfg"
    path.write_bytes(b'a = "\xff\xfe";')
    with pytest.raises(ConfigError):
        load_config(path)