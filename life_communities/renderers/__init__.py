"""Renderers package for grid display."""

from life_communities.renderers.text_grid import render_summary, render_text

__all__ = ["render_summary", "render_text"]
