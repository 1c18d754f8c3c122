import math

import numpy as np
import pytest

from discoscene.app import _make_spotlights, main
from discoscene.color import Color


def test_missing_resources_reports_mesh_error(tmp_path, capsys):
    status = main(["--resources", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == -1
    assert "Failed to load the mesh located at" in out
    assert "Amy.obj" in out


def test_unknown_option_exits():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2


def test_spotlights_share_position_and_cutoff():
    lights = _make_spotlights()
    assert len(lights) == 3
    for light in lights:
        assert np.allclose(light.pos, [0, 200, 0])
        assert math.isclose(light.cutoff, math.pi / 6)
        assert light.ambient_color == Color(0.2, 0.2, 0.2)
        assert light.kc == 1


def test_spotlights_are_red_green_blue():
    colours = [light.diffuse_color.as_rgb() for light in _make_spotlights()]
    assert colours == [(1, 0, 0), (0, 1, 0), (0, 0, 1)]


def test_spotlights_are_numbered_consecutively():
    numbers = [int(light.shader_postfix) for light in _make_spotlights()]
    assert numbers[1] == numbers[0] + 1
    assert numbers[2] == numbers[1] + 1
    assert all(light.shader_prefix == "spotlight" for light in _make_spotlights())


def test_spotlight_directions_point_down():
    for light in _make_spotlights():
        assert light.spot_dir[1] == -200
        assert np.allclose(light.spot_dir_rotated, light.spot_dir)