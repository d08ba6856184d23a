"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Generator settings and environment configuration
- logging: Structured logging configuration
"""
