"""
RenderKit Documentation Generator
=================================

Runs one generation: resolve the render-kit, group its renderers once, build
every page and hand everything to the output tracker. A run is a single linear
call sequence; the first fatal error ends it and earlier files stay on disk.
"""

from typing import Any, List, Optional
from pathlib import Path

from renderkitdoc.config.logging import get_logger
from renderkitdoc.core.exceptions import RenderKitDocError
from renderkitdoc.core.grouping import group_by_family, resolve_render_kit
from renderkitdoc.core.output import AssetSource, OutputTracker, packaged_asset_source
from renderkitdoc.core.rendering.pages import (
    DetailPageBuilder,
    NavigationFrameBuilder,
    SummaryTableBuilder,
    create_environment,
)
from renderkitdoc.models.schemas import FacesConfig, RunConfig, TouchedFile

logger = get_logger(__name__)


class RenderKitDocGenerator:
    """Generate HTML documentation for one render-kit of a Config Tree."""

    def __init__(
        self,
        output_directory: Path,
        render_kit_id: str,
        run_config: Optional[RunConfig] = None,
        asset_source: Optional[AssetSource] = None,
    ) -> None:
        self.render_kit_id = render_kit_id
        self.run_config = run_config or RunConfig.from_settings()
        self.tracker = OutputTracker(
            Path(output_directory), render_kit_id, asset_source or packaged_asset_source
        )
        self.logger: Any = logger.bind(render_kit_id=render_kit_id)  # structlog.BoundLoggerBase

        env = create_environment()
        self.frame_builder = NavigationFrameBuilder(render_kit_id, self.run_config, env)
        self.summary_builder = SummaryTableBuilder(render_kit_id, self.run_config, env)
        self.detail_builder = DetailPageBuilder(render_kit_id, self.run_config, env)

    @property
    def files_touched(self) -> List[TouchedFile]:
        return self.tracker.files_touched

    def generate_html_docs(self, config: FacesConfig) -> List[TouchedFile]:
        """
        Generate the documentation set.

        Args:
            config: Config Tree holding the render-kit

        Returns:
            Every path created, copied or written, in order

        Raises:
            RenderKitDocError: On the first fatal error of the run
        """
        self.logger.info("Generating render-kit documentation", output=str(self.tracker.base_directory))
        try:
            self.tracker.ensure_layout()
            self.tracker.copy_assets()

            render_kit = resolve_render_kit(config, self.render_kit_id)
            family_group = group_by_family(render_kit)

            self.tracker.write_base_document(self.frame_builder.build(render_kit, family_group))
            self.tracker.write_render_kit_document(
                self.summary_builder.build(render_kit, family_group)
            )
            for page in self.detail_builder.build(render_kit, family_group):
                self.tracker.write_render_kit_document(page)
        except RenderKitDocError as e:
            self.logger.error(
                "Render-kit documentation failed",
                error=str(e),
                files_touched=len(self.tracker.files_touched),
            )
            raise

        touched = self.tracker.files_touched
        self.logger.info("Render-kit documentation generated", files_touched=len(touched))
        return touched


def generate_render_kit_docs(
    config: FacesConfig,
    output_directory: Path,
    render_kit_id: str,
    run_config: Optional[RunConfig] = None,
    asset_source: Optional[AssetSource] = None,
) -> List[TouchedFile]:
    """
    Generate documentation for a render-kit.

    Returns:
        Every path created, copied or written, in order
    """
    generator = RenderKitDocGenerator(output_directory, render_kit_id, run_config, asset_source)
    return generator.generate_html_docs(config)
