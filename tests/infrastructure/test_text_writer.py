"""Tests for the text writer adapter (TextRasterWriter).

The rendering is an inspection format: one newline-terminated line per row,
cells separated by a single space.
"""

from __future__ import annotations

import io

from domain.raster.matrix import RasterMatrix
from domain.raster.services import format_cell, render_text
from src.infrastructure.raster import TextRasterWriter


# ===========================================================================
# Cell and grid rendering
# ===========================================================================
def test_format_cell_per_type():
    assert format_cell(True) == "1"
    assert format_cell(False) == "0"
    assert format_cell(127) == "127"
    assert format_cell(0.25) == "0.25"
    assert format_cell(1.0) == "1"


def test_render_int_grid(known_int8_2x2):
    assert render_text(known_int8_2x2.to_array()) == "0 27\n127 100\n"


def test_render_bool_grid():
    matrix = RasterMatrix.from_array([[True, False, True]], domain="bool")
    assert TextRasterWriter().render(matrix) == "1 0 1\n"


def test_render_float_grid():
    matrix = RasterMatrix.from_array([[0.5, 0.0], [1.0, 0.125]], domain="float32")
    assert TextRasterWriter().render(matrix) == "0.5 0\n1 0.125\n"


def test_every_line_is_newline_terminated(zero_int8_3x3):
    text = TextRasterWriter().render(zero_int8_3x3)

    assert text.endswith("\n")
    assert text.splitlines() == ["0 0 0", "0 0 0", "0 0 0"]


def test_header_line():
    writer = TextRasterWriter(header=True)
    matrix = RasterMatrix(1, 2, domain="int16")

    assert writer.render(matrix) == "# 1x2 int16\n0 0\n"


# ===========================================================================
# Stream output
# ===========================================================================
def test_write_to_stream_returns_length(known_int8_2x2):
    stream = io.StringIO()

    written = TextRasterWriter().write(known_int8_2x2, stream)

    assert stream.getvalue() == "0 27\n127 100\n"
    assert written == len("0 27\n127 100\n")


def test_write_defaults_to_stdout(known_int8_2x2, capsys):
    TextRasterWriter().write(known_int8_2x2)
    assert capsys.readouterr().out == "0 27\n127 100\n"


def test_writer_matches_str(known_int8_2x2):
    assert TextRasterWriter().render(known_int8_2x2) == str(known_int8_2x2)


def test_write_is_logged(known_int8_2x2, caplog):
    caplog.set_level("DEBUG", logger="src.infrastructure.raster.text_writer")

    TextRasterWriter().write(known_int8_2x2, io.StringIO())

    assert "Wrote 2x2 int8 matrix (13 chars)" in caplog.text
