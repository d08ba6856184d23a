"""
Core Generation Logic
=====================

Components:
- grouping: Component-family grouping and render-kit resolution
- text: Locale-aware description selection and wrapper tag extraction
- rendering: Page builders, templates and static assets
- output: Filesystem output and touched-file tracking
- generator: Generation run orchestration
- loader: YAML/JSON Config Tree loading and validation
"""
