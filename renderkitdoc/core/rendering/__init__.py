"""
Rendering Module
===============

HTML page generation for the render-kit documentation set.

Components:
- pages: Navigation frame, summary table and detail page builders
- templates: Jinja2 page templates
- static: Static assets copied verbatim (index page, stylesheet)
"""
