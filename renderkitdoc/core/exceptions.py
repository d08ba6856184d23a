"""
Generation Errors
=================

Every fatal condition of a generation run surfaces as a RenderKitDocError.
Nothing is retried and files written before the failure stay on disk.
"""

from typing import List, Optional


class RenderKitDocError(Exception):
    """Base class for documentation generation failures."""

    pass


class InputConsistencyError(RenderKitDocError):
    """The Config Tree violates an invariant generation relies on."""

    pass


class RenderKitNotFoundError(RenderKitDocError):
    """No render-kit exists to document."""

    pass


class PageGenerationError(RenderKitDocError):
    """A page template failed to render."""

    pass


class OutputError(RenderKitDocError):
    """Creating, copying or writing an output file failed."""

    pass


class ConfigTreeLoadError(RenderKitDocError):
    """A Config Tree document could not be loaded."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []
