"""Rendering pipeline: normalized chord -> chord symbol or structure."""

from chord_symbol.renderer.render import chord_renderer_factory, render_chord

__all__ = ["chord_renderer_factory", "render_chord"]
