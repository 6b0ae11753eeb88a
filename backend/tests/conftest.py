"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgnorm.engine.batch import BatchOrchestrator


# Lucide-style icons already on a 24px frame

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
  <line x1="9" x2="9.01" y1="9" y2="9"/>
</svg>'''

# Non-24 frames

BOX_100_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 L90 90"/>
</svg>'''

SIZE_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48px" height="48">
  <path d="M0 0 h48 v48 h-48 Z"/>
</svg>'''

# Centered frame: origin at (-12, -12)
CENTERED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-12 -12 24 24">
  <path d="M-10 -10 L10 10"/>
  <path d="M-10 10 h20"/>
  <path d="M-5 0 a5 5 0 1 0 10 0"/>
</svg>'''

MALFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 48">
  <path d="M10 10 L"/>
  <path d="M4 4 L44 44"/>
</svg>'''

NO_FRAME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0 0 L1 1"/>
</svg>'''


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def box_100_svg() -> str:
    return BOX_100_SVG


@pytest.fixture
def size_only_svg() -> str:
    return SIZE_ONLY_SVG


@pytest.fixture
def centered_svg() -> str:
    return CENTERED_SVG


@pytest.fixture
def malformed_svg() -> str:
    return MALFORMED_SVG


@pytest.fixture
def no_frame_svg() -> str:
    return NO_FRAME_SVG


@pytest.fixture
def orchestrator():
    orch = BatchOrchestrator(target_size=24, precision=3, workers=2)
    yield orch
    orch.close()
