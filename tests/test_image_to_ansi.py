"""Tests for the line renderer and the image pipeline."""

import pytest
from PIL import Image

from cli_logo.colors import RESET
from cli_logo.image_to_ansi import image_to_ansi, render, render_lines
from cli_logo.options import OptionsError, RenderOptions
from cli_logo.pixels import PixelBuffer, load_pixels, target_height

from conftest import BLACK, CLEAR, WHITE

BLANK = RESET + " "


class TestTargetHeight:
    @pytest.mark.parametrize(
        "width, native, expected",
        [
            (60, (100, 100), 30),
            (3, (1, 1), 2),
            (80, (200, 100), 20),
            (10, (10, 40), 20),
            (1, (100, 1), 0),
        ],
    )
    def test_aspect(self, width, native, expected):
        assert target_height(width, *native) == expected

    @pytest.mark.parametrize("width", [0, -5, 2.5, True])
    def test_rejects_bad_width(self, width):
        with pytest.raises(ValueError):
            target_height(width, 10, 10)


class TestPixelBuffer:
    def test_length_invariant(self):
        with pytest.raises(ValueError):
            PixelBuffer(2, 2, b"\x00" * 15)

    def test_pixel_lookup(self, make_buffer):
        buf = make_buffer([[BLACK, (1, 2, 3, 4)]])
        assert buf.pixel(1, 0) == (1, 2, 3, 4)
        assert buf.as_array().shape == (1, 2, 4)


class TestRender:
    def test_all_white_background_transparent(self, make_buffer):
        buf = make_buffer([[WHITE, WHITE], [WHITE, WHITE]])
        opt = RenderOptions(width=2, background_transparent=True, background_threshold=250)
        assert render(buf, opt) == (BLANK * 2 + "\n") * 2

    def test_enclosed_white_renders_as_glyph(self, make_buffer):
        rows = [[BLACK] * 3, [BLACK, WHITE, BLACK], [BLACK] * 3]
        opt = RenderOptions(
            width=3, color_mode="none", charset="detailed", background_transparent=True
        )
        lines = render(make_buffer(rows), opt).splitlines()
        assert len(lines) == 3
        assert lines[1][1] == "@"
        assert BLANK not in "".join(lines)

    def test_transparent_pixel_is_blank_in_every_mode(self, make_buffer):
        for mode in ("none", "256", "truecolor"):
            opt = RenderOptions(width=1, color_mode=mode)
            assert render(make_buffer([[CLEAR]]), opt) == BLANK + "\n"

    def test_white_not_blank_without_background_flag(self, make_buffer):
        opt = RenderOptions(width=1, color_mode="none", charset="detailed")
        assert render(make_buffer([[WHITE]]), opt) == "@\n"

    def test_truecolor_wraps_glyph(self, make_buffer):
        opt = RenderOptions(width=1, color_mode="truecolor", charset="blocks")
        out = render(make_buffer([[(255, 0, 0, 255)]]), opt)
        assert out == "\x1b[38;2;255;0;0m░" + RESET + "\n"

    def test_indexed_wraps_glyph(self, make_buffer):
        opt = RenderOptions(width=1, color_mode="256", charset="detailed")
        out = render(make_buffer([[(255, 0, 0, 255)]]), opt)
        assert out == "\x1b[38;5;196m-" + RESET + "\n"

    def test_none_mode_has_no_escapes(self, make_buffer):
        opt = RenderOptions(width=2, color_mode="none", charset="detailed")
        out = render(make_buffer([[BLACK, WHITE]]), opt)
        assert "\x1b" not in out
        assert out == " @\n"

    def test_invert(self, make_buffer):
        opt = RenderOptions(width=2, color_mode="none", charset="detailed", invert=True)
        assert render(make_buffer([[BLACK, WHITE]]), opt) == "@ \n"

    def test_mask_ignored_when_flag_off(self, make_buffer):
        import numpy as np

        opt = RenderOptions(width=1, color_mode="none", charset="detailed")
        lines = list(render_lines(make_buffer([[WHITE]]), opt, np.array([True])))
        assert lines == ["@"]

    def test_empty_buffer(self):
        assert render(PixelBuffer(4, 0, b""), RenderOptions(width=4)) == ""

    def test_invalid_options_fail_before_rendering(self, make_buffer):
        with pytest.raises(OptionsError) as exc:
            render(make_buffer([[WHITE]]), RenderOptions(charset="emoji"))
        assert exc.value.field == "charset"


class TestImageToAnsi:
    def test_uniform_image(self, red_image):
        opt = RenderOptions(width=4, color_mode="truecolor", charset="blocks")
        out = image_to_ansi(str(red_image), opt)
        lines = out.splitlines()
        assert len(lines) == 2
        assert lines[0] == ("\x1b[38;2;255;0;0m░" + RESET) * 4

    def test_load_pixels_dimensions(self, ring_image):
        buf = load_pixels(str(ring_image), 32)
        assert (buf.width, buf.height) == (32, 16)
        assert len(buf.data) == 32 * 16 * 4

    def test_rgb_source_gets_alpha(self, tmp_path):
        path = tmp_path / "rgb.jpg"
        Image.new("RGB", (10, 10), (0, 0, 0)).save(path)
        buf = load_pixels(str(path), 4)
        assert all(buf.pixel(x, y)[3] == 255 for x in range(4) for y in range(2))

    def test_background_canvas_becomes_blank(self, ring_image):
        opt = RenderOptions(width=32, color_mode="none", background_transparent=True)
        lines = image_to_ansi(str(ring_image), opt).splitlines()
        assert lines[0] == BLANK * 32

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            image_to_ansi(str(tmp_path / "nope.png"), RenderOptions(width=4))

    def test_options_checked_before_decode(self, tmp_path):
        with pytest.raises(OptionsError) as exc:
            image_to_ansi(str(tmp_path / "nope.png"), RenderOptions(width=0))
        assert exc.value.field == "width"
