"""Tests for frame inference."""

from __future__ import annotations

import pytest

from svgnorm.engine.frame import Frame, infer_frame
from svgnorm.errors import NoFrameError
from tests.conftest import BOX_100_SVG, CENTERED_SVG, NO_FRAME_SVG, SIZE_ONLY_SVG


def test_viewbox():
    assert infer_frame(BOX_100_SVG) == Frame(0.0, 0.0, 100.0, 100.0)


def test_viewbox_with_origin():
    frame = infer_frame(CENTERED_SVG)
    assert frame == Frame(-12.0, -12.0, 24.0, 24.0)
    assert frame.has_origin


def test_viewbox_with_commas():
    assert infer_frame('<svg viewBox="0,0, 32,16"></svg>') == Frame(0.0, 0.0, 32.0, 16.0)


def test_viewbox_preferred_over_size():
    svg = '<svg width="100" height="100" viewBox="0 0 24 24"></svg>'
    assert infer_frame(svg) == Frame(0.0, 0.0, 24.0, 24.0)


def test_width_height_with_unit():
    frame = infer_frame(SIZE_ONLY_SVG)
    assert frame == Frame(0.0, 0.0, 48.0, 48.0)
    assert not frame.has_origin


def test_invalid_viewbox_falls_back_to_size():
    svg = '<svg viewBox="0 0 auto 10" width="16" height="8"></svg>'
    assert infer_frame(svg) == Frame(0.0, 0.0, 16.0, 8.0)


def test_single_quoted_attributes():
    assert infer_frame("<svg viewBox='0 0 10 20'></svg>") == Frame(0.0, 0.0, 10.0, 20.0)


def test_stroke_width_is_not_width():
    svg = '<svg stroke-width="2" width="16" height="16"></svg>'
    assert infer_frame(svg).width == 16.0


def test_only_root_element_is_read():
    svg = '<svg viewBox="0 0 32 32"><svg viewBox="0 0 10 10"></svg><rect width="5" height="5"/></svg>'
    assert infer_frame(svg) == Frame(0.0, 0.0, 32.0, 32.0)


@pytest.mark.parametrize(
    "svg",
    [
        NO_FRAME_SVG,
        '<svg width="24"></svg>',
        '<svg width="100%" height="100%"></svg>',
        '<svg viewBox="0 0 0 24"></svg>',
        '<svg width="0" height="24"></svg>',
        "<path d='M0 0'/>",
    ],
)
def test_no_frame(svg):
    with pytest.raises(NoFrameError):
        infer_frame(svg)
