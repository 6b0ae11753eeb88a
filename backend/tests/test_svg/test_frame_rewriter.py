"""Tests for path location and the frame rewriter."""

from __future__ import annotations

import pytest

from svgnorm.errors import NoFrameError
from svgnorm.svg.frame_rewriter import rewrite_document
from svgnorm.svg.parser import find_paths
from tests.conftest import HOME_SVG, SIZE_ONLY_SVG


class TestFindPaths:
    def test_document_order_and_spans(self):
        paths = find_paths(HOME_SVG)
        assert [p.index for p in paths] == [0, 1]
        for p in paths:
            start, end = p.span
            assert HOME_SVG[start:end] == p.data
        assert paths[0].data.startswith("M15 21")

    def test_single_quotes_and_attribute_order(self):
        svg = "<svg><path fill='red' d='M1 1'/><path data-d=\"x\" d=\"M2 2\"/></svg>"
        assert [p.data for p in find_paths(svg)] == ["M1 1", "M2 2"]

    def test_paths_without_data_are_skipped(self):
        assert find_paths('<svg><path fill="red"/></svg>') == []


class TestRewriteDocument:
    def test_root_frame_replaced(self):
        out = rewrite_document(SIZE_ONLY_SVG, [], [], 24)
        assert out.startswith(
            '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">'
        )
        assert "48px" not in out

    def test_viewbox_replaced(self):
        svg = '<svg viewBox="-12 -12 24 24" fill="none"><path d="M0 0"/></svg>'
        out = rewrite_document(svg, [], [], 16)
        assert out == '<svg fill="none" width="16" height="16" viewBox="0 0 16 16"><path d="M0 0"/></svg>'

    def test_fractional_size(self):
        out = rewrite_document('<svg width="1" height="1"></svg>', [], [], 0.5)
        assert out == '<svg width="0.5" height="0.5" viewBox="0 0 0.5 0.5"></svg>'

    def test_child_sizes_untouched(self):
        svg = '<svg viewBox="0 0 48 48"><rect width="10" height="10"/></svg>'
        out = rewrite_document(svg, [], [], 24)
        assert '<rect width="10" height="10"/>' in out

    def test_self_closing_root(self):
        assert rewrite_document('<svg width="8" height="8"/>', [], [], 24) == (
            '<svg width="24" height="24" viewBox="0 0 24 24"/>'
        )

    def test_path_data_spliced(self):
        paths = find_paths(HOME_SVG)
        out = rewrite_document(HOME_SVG, paths, ["M1 1", None], 24)
        assert 'd="M1 1"' in out
        assert f'd="{paths[1].data}"' in out
        assert paths[0].data not in out

    def test_replacement_count_must_match(self):
        with pytest.raises(ValueError):
            rewrite_document(HOME_SVG, find_paths(HOME_SVG), ["M0 0"], 24)

    def test_missing_root(self):
        with pytest.raises(NoFrameError):
            rewrite_document("<path d='M0 0'/>", [], [], 24)

    def test_rewrite_is_stable(self):
        once = rewrite_document(HOME_SVG, [], [], 24)
        assert rewrite_document(once, [], [], 24) == once
