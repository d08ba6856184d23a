"""
RenderKit Documentation Generator
=================================

Generate a small static HTML documentation set (navigation frame, summary table
and one detail page per renderer) from an in-memory render-kit configuration tree.

This package provides:
- Immutable Pydantic models for render-kits, renderers, attributes and descriptions
- Deterministic grouping of renderers by component family
- Jinja2 page builders for the frame, summary and detail pages
- An output tracker reporting every file a run touches
- A command-line entry point for YAML/JSON render-kit descriptions
"""

__version__ = "1.0.0"
