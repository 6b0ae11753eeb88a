"""Tests for the transform engine."""

from __future__ import annotations

import math

import pytest

from svgnorm.engine.frame import Frame
from svgnorm.engine.transform import Transform, apply_transform, validate_target_size
from svgnorm.errors import InvalidScaleError
from svgnorm.svg.path_tokenizer import CommandKind, PathCommand, tokenize


def _ops(path_data: str, transform: Transform) -> list[tuple[float, ...]]:
    return [c.operands for c in apply_transform(tokenize(path_data), transform)]


class TestTransform:
    def test_from_frame(self):
        t = Transform.from_frame(Frame(0, 0, 100, 50), 24)
        assert t == Transform(dx=0, dy=0, sx=0.24, sy=0.48)

    def test_from_frame_with_origin(self):
        t = Transform.from_frame(Frame(-12, -12, 24, 24), 24)
        assert (t.dx, t.dy) == (12, 12)
        assert t.is_identity is False

    def test_identity(self):
        assert Transform.from_frame(Frame(0, 0, 24, 24), 24).is_identity

    @pytest.mark.parametrize("sx", [0.0, math.inf, math.nan])
    def test_invalid_scale(self, sx):
        with pytest.raises(InvalidScaleError):
            Transform(sx=sx)

    @pytest.mark.parametrize("size", [0, -1, math.inf, math.nan, "24", True])
    def test_invalid_target_size(self, size):
        with pytest.raises(InvalidScaleError):
            validate_target_size(size)


class TestApplyTransform:
    def test_absolute_pairs_translate_then_scale(self):
        t = Transform(dx=12, dy=12, sx=2, sy=0.5)
        assert _ops("M-10 -10 L10 10", t) == [(4.0, 1.0), (44.0, 11.0)]

    def test_relative_pairs_scale_only(self):
        t = Transform(dx=5, dy=5, sx=2, sy=3)
        assert _ops("M0 0 l10 10", t) == [(10.0, 15.0), (20.0, 30.0)]

    def test_horizontal_and_vertical(self):
        t = Transform(dx=1, dy=2, sx=2, sy=3)
        assert _ops("M0 0 H10 V10 h10 v10", t) == [(2.0, 6.0), (22.0,), (36.0,), (20.0,), (30.0,)]

    def test_curves_transform_every_pair(self):
        t = Transform(dx=1, dy=1, sx=2, sy=2)
        ops = _ops("M0 0 C1 1 2 2 3 3 q1 1 2 2", t)
        assert ops[1] == (4.0, 4.0, 6.0, 6.0, 8.0, 8.0)
        assert ops[2] == (2.0, 2.0, 4.0, 4.0)

    def test_arc_radii_scale_independently(self):
        t = Transform(sx=2, sy=1)
        assert _ops("M0 0 A10 5 30 1 0 40 40", t)[1] == (20.0, 5.0, 30.0, 1.0, 0.0, 80.0, 40.0)

    def test_arc_radii_never_translated(self):
        t = Transform(dx=100, dy=100, sx=1, sy=1)
        assert _ops("M0 0 A10 5 0 0 1 0 0", t)[1] == (10.0, 5.0, 0.0, 0.0, 1.0, 100.0, 100.0)

    def test_relative_arc_endpoint_not_translated(self):
        t = Transform(dx=100, dy=100, sx=2, sy=2)
        assert _ops("M0 0 a1 1 0 0 1 5 5", t)[1] == (2.0, 2.0, 0.0, 0.0, 1.0, 10.0, 10.0)

    def test_close_path_passes_through(self):
        cmds = apply_transform(tokenize("M1 1 L2 2 Z"), Transform(dx=1, sx=2, sy=2))
        assert cmds[-1] == PathCommand(CommandKind.CLOSE, False)

    def test_leading_relative_moveto_is_absolute(self):
        t = Transform(dx=-10, dy=-10, sx=1, sy=1)
        cmds = apply_transform(tokenize("m10 10 l20 20 m5 5"), t)
        assert [c.letter for c in cmds] == ["m", "l", "m"]
        assert [c.operands for c in cmds] == [(0.0, 0.0), (20.0, 20.0), (5.0, 5.0)]

    def test_input_is_not_modified(self):
        cmds = tokenize("M1 1 L2 2")
        before = list(cmds)
        apply_transform(cmds, Transform(sx=3, sy=3))
        assert cmds == before
