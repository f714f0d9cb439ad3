import json
import sys

import pytest

from shadelab.main import main


@pytest.fixture(autouse=True)
def _truecolor(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["shadelab", *argv])
    main()


def test_inspector_prints_every_space(monkeypatch, capsys):
    run_cli(monkeypatch, "-H", "3f51b5", "-hb")
    out = capsys.readouterr().out
    assert "#3f51b5" in out
    assert "rgb(63, 81, 181)" in out
    assert "hsl(231, 48%, 48%)" in out
    assert "hsb(231, 65%, 71%)" in out
    assert "cmyk(65%, 55%, 0%, 29%)" in out


def test_inspector_random_is_seeded(monkeypatch, capsys):
    run_cli(monkeypatch, "-r", "-s", "7", "-hb")
    first = capsys.readouterr().out
    run_cli(monkeypatch, "-r", "-s", "7", "-hb")
    assert capsys.readouterr().out == first


def test_inspector_invalid_hex_exits_2(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-H", "nothex")
    assert exc.value.code == 2
    assert "invalid hex value" in capsys.readouterr().err


def test_inspector_requires_color(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch)
    assert exc.value.code == 2


def test_edit_clamps_and_rederives(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "edit", "-H", "3f51b5", "-s", "rgb", "-c", "r", "-V", "999", "-hb")
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "#ff51b5" in out
    assert "rgb(255, 81, 181)" in out


def test_edit_unknown_channel(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "edit", "-H", "3f51b5", "-s", "hsl", "-c", "k", "-V", "10")
    assert exc.value.code == 2
    assert "channels for hsl: h, s, l" in capsys.readouterr().out


def test_shades_select(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "shades", "-H", "3f51b5", "--select", "50")
    out = capsys.readouterr().out
    assert "#9fa8da" in out
    assert "<- selected" in out
    assert "selected" in out


def test_shades_locate(monkeypatch, capsys):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "shades", "-H", "3f51b5", "-S", "200", "-L", "000000")
    out = capsys.readouterr().out
    assert "200 (100%)" in out
    assert "#ffffff" in out
    assert "#000000" in out


def test_favorites_add_list_remove(monkeypatch, capsys, tmp_path):
    store = str(tmp_path / "favs.json")

    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "favorites", "--store", store, "add", "-H", "3f51b5", "-n", "indigo")
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "favorites", "--store", store, "add", "-H", "#3F51B5")
    captured = capsys.readouterr()
    assert "added #3f51b5" in captured.out
    assert "already a favorite" in captured.err

    with open(store, encoding="utf-8") as handle:
        assert json.load(handle) == [{"color": "#3f51b5", "name": "indigo"}]

    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "favorites", "--store", store, "list", "-q", "INDI")
    assert "indigo" in capsys.readouterr().out

    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "favorites", "--store", store, "remove", "3")
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "favorites", "--store", store, "remove", "0")
    assert exc.value.code == 0
    assert "removed #3f51b5" in capsys.readouterr().out


def test_subcommand_in_wrong_position(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-H", "3f51b5", "shades")
    assert exc.value.code == 2
    assert "must be the first argument" in capsys.readouterr().err


def test_inspector_shade_and_space_filter(monkeypatch, capsys):
    run_cli(monkeypatch, "-H", "3f51b5", "-sh", "50", "-sp", "rgb", "-sp", "hsv", "-hb")
    out = capsys.readouterr().out
    assert "#9fa8da" in out
    assert "-50%" in out
    assert "rgb(159, 168, 218)" in out
    assert "hsb(" in out
    assert "hsl(" not in out
    assert "cmyk(" not in out


def test_favorites_unwritable_store_exits_1(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "favorites", "--store", str(tmp_path), "add", "-H", "3f51b5")
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "could not save favorites" in captured.err
    assert "added" not in captured.out
