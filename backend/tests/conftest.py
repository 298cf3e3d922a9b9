"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample SVGs covering the ways icon themes spell colors

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <path d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z" fill="#45B7D1"/>
  <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
  <circle cx="100" cy="110" r="10" fill="#FFEAA7"/>
  <circle cx="156" cy="110" r="10" fill="#ffeaa7"/>
</svg>'''

# Inline styles, shorthand, and an 8-digit alpha color that must be left alone
STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <path style="fill:#333;stroke:#AABBCC" d="M1 1h14v14H1z"/>
  <circle cx="8" cy="8" r="3" fill="#aabbccdd"/>
  <rect x="2" y="2" width="2" height="2" fill="#333333"/>
</svg>'''

# Inkscape output: page colors and RDF metadata are not painted
INKSCAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd" viewBox="0 0 16 16">
  <sodipodi:namedview id="namedview1" pagecolor="#ffffff" bordercolor="#666666"/>
  <sodipodi:namedview id="namedview2" pagecolor="#eeeeee">
    <inkscape:grid color="#3f3fff"/>
  </sodipodi:namedview>
  <metadata>
    <rdf:RDF><cc:Work about="#a1b2c3"/></rdf:RDF>
  </metadata>
  <path fill="#2e3436" d="M0 0h16v16H0z"/>
</svg>'''

# Paired namedview with page colors and several self-closing grid children
INKSCAPE_PAIRED_NAMEDVIEW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <sodipodi:namedview id="base" pagecolor="#fafafa" bordercolor="#444444">
    <inkscape:grid id="grid1" color="#ff0000"/>
    <inkscape:grid id="grid2" color="#00ff00" empcolor="#0000ff"/>
  </sodipodi:namedview>
  <path fill="#2e3436" d="M0 0h16v16H0z"/>
</svg>'''


@pytest.fixture
def filled_rect_svg() -> str:
    return FILLED_RECT_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def inkscape_svg() -> str:
    return INKSCAPE_SVG
