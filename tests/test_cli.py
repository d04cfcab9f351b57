"""Tests for the tonal-theme command line."""

import json

import pytest

from tonal_theme import CustomColor, cli

from conftest import RED, image_bytes, make_image


class TestParseCustomColor:
    """NAME=HEX[:blend|:noblend] arguments."""

    def test_default_blends(self):
        assert cli.parse_custom_color("brand=#ff0000") == CustomColor(
            value=RED, name="brand", blend=True
        )

    def test_noblend(self):
        assert cli.parse_custom_color("brand=ff0000:noblend").blend is False

    @pytest.mark.parametrize(
        "text", ["brand", "=#ff0000", "brand=#ff0000:maybe", "brand=#zzz"]
    )
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            cli.parse_custom_color(text)


class TestParser:
    """Argument validation."""

    def test_version_flag_prints_and_exits_zero(self, capsys):
        parser = cli.build_parser()
        with pytest.raises(SystemExit) as exc:
            parser.parse_args(["--version"])
        assert exc.value.code == 0
        assert "tonal-theme" in capsys.readouterr().out

    def test_requires_seed_or_image(self):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2

    def test_rejects_seed_and_image(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["#4285f4", "--image", "photo.png"])
        assert exc.value.code == 2

    def test_rejects_bad_seed(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["not-a-color"])
        assert exc.value.code == 2

    def test_rejects_bad_custom_color(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["#4285f4", "--custom", "brand"])
        assert exc.value.code == 2

    def test_dark_and_light_are_exclusive(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["#4285f4", "--dark", "--light"])
        assert exc.value.code == 2


class TestMain:
    """End-to-end runs."""

    def test_from_seed_exports_both_modes(self, tmp_path, capsys):
        cli.main(["#4285f4", "-o", str(tmp_path), "--custom", "brand=#ff0000"])

        for name in (
            "theme.json",
            "theme.css",
            "theme-preview-light.html",
            "theme-preview-dark.html",
        ):
            assert (tmp_path / name).exists()

        data = json.loads((tmp_path / "theme.json").read_text())
        assert data["seed"] == "#4285f4"
        assert data["customColors"][0]["name"] == "brand"
        assert "@media (prefers-color-scheme: dark)" in (tmp_path / "theme.css").read_text()

        out = capsys.readouterr().out
        assert "Seed: #4285f4" in out
        assert "Exported:" in out

    def test_single_mode(self, tmp_path):
        cli.main(["#4285f4", "-o", str(tmp_path), "--name", "blue", "--dark"])
        assert (tmp_path / "blue-preview-dark.html").exists()
        assert not (tmp_path / "blue-preview-light.html").exists()
        assert "@media" not in (tmp_path / "blue.css").read_text()

    def test_from_image(self, tmp_path, capsys):
        image_path = tmp_path / "sunset.png"
        image_path.write_bytes(image_bytes(make_image([((255, 0, 0), 40)])))
        out_dir = tmp_path / "out"

        cli.main(["--image", str(image_path), "-o", str(out_dir)])

        assert (out_dir / "sunset.json").exists()
        assert "Extracted seed: #ff0000" in capsys.readouterr().out

    def test_missing_image_exits_one(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--image", str(tmp_path / "missing.png"), "-o", str(tmp_path)])
        assert exc.value.code == 1
        assert "Error reading image" in capsys.readouterr().err

    def test_undecodable_image_exits_one(self, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"not an image")
        with pytest.raises(SystemExit) as exc:
            cli.main(["--image", str(bad), "-o", str(tmp_path)])
        assert exc.value.code == 1
