"""
Data Models
===========

Pydantic data models for the render-kit configuration tree and generation runs.

Models:
- schemas: Config Tree models, run configuration and output records
"""
