"""
Page Builders
=============

Build the three kinds of documents of a render-kit documentation set:
the navigation frame listing every renderer, the summary table, and one
detail page per renderer. Output shapes are fixed by the templates in
``templates/``; builders only prepare template context.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path
from abc import ABC, abstractmethod
import jinja2

from renderkitdoc.config.logging import get_logger
from renderkitdoc.core.exceptions import InputConsistencyError, PageGenerationError
from renderkitdoc.core.grouping import checked_renderers, group_by_family
from renderkitdoc.core.text import first_sentence, first_wrapper_tag, select_localized
from renderkitdoc.models.schemas import (
    FamilyGroup,
    GeneratedPage,
    RenderKit,
    Renderer,
    RunConfig,
)

logger = get_logger(__name__)

FRAME_FILENAME = "allrenderers-frame.html"
SUMMARY_FILENAME = "renderkit-summary.html"

RENDERS_CHILDREN_SENTENCE = "This renderer is responsible for rendering its children."
NOT_RENDERS_CHILDREN_SENTENCE = "This renderer is not responsible for rendering its children."
NO_ATTRIBUTES_SENTENCE = "This renderer-type has no attributes"
UNDEFINED_DEFAULT_VALUE = "undefined"

TEMPLATE_DIR = Path(__file__).parent / "templates"


def version_suffix(version: Optional[str]) -> str:
    """Parenthesized version shown after a render-kit title, or nothing."""
    return f" ({version})" if version else ""


def create_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Create the Jinja2 environment shared by the page builders."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["version_suffix"] = version_suffix
    return env


class BasePageBuilder(ABC):
    """Abstract base class for page builders."""

    template_name: str = ""

    def __init__(
        self,
        render_kit_id: str,
        run_config: Optional[RunConfig] = None,
        environment: Optional[jinja2.Environment] = None,
    ) -> None:
        self.render_kit_id = render_kit_id
        self.run_config = run_config or RunConfig()
        self.env = environment or create_environment()
        self.logger: Any = logger.bind(  # structlog.BoundLoggerBase
            builder=type(self).__name__, render_kit_id=render_kit_id
        )

    @abstractmethod
    def build(self, render_kit: RenderKit, family_group: Optional[FamilyGroup] = None) -> Any:
        """Build the builder's document(s) for a render-kit."""
        pass

    def _render(self, **context: Any) -> str:
        """
        Render the builder's template.

        Raises:
            PageGenerationError: If the template fails to render
        """
        try:
            template = self.env.get_template(self.template_name)
            return template.render(
                render_kit_id=self.render_kit_id,
                version=self.run_config.version_string,
                **context,
            )
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed for {self.template_name}: {e}"
            self.logger.error("Page generation failed", error=error_msg)
            raise PageGenerationError(error_msg) from e


class NavigationFrameBuilder(BasePageBuilder):
    """Builds allrenderers-frame.html, the renderer list shown in the left frame."""

    template_name = FRAME_FILENAME

    def build(self, render_kit: RenderKit, family_group: Optional[FamilyGroup] = None) -> GeneratedPage:
        if family_group is None:
            family_group = group_by_family(render_kit)

        families = {
            family: [self._frame_entry(renderer) for renderer in renderers]
            for family, renderers in family_group.items()
        }
        html = self._render(stylesheet_href="stylesheet.css", families=families)
        self.logger.info("Navigation frame generated", families=len(families), html_length=len(html))
        return GeneratedPage(filename=FRAME_FILENAME, html=html)

    def _frame_entry(self, renderer: Renderer) -> Dict[str, str]:
        """Link to the renderer's page, wrapped in the author's div/span when present."""
        wrapper_open = wrapper_close = ""
        localized = select_localized(renderer, self.run_config.active_locale_country_code)
        if localized is not None:
            wrapper = first_wrapper_tag(localized.text)
            if wrapper is not None:
                wrapper_open, wrapper_close = wrapper.text, wrapper.closing_tag

        return {
            "renderer_type": renderer.renderer_type,
            "href": f"{self.render_kit_id}/{renderer.page_filename}",
            "wrapper_open": wrapper_open,
            "wrapper_close": wrapper_close,
        }


class SummaryTableBuilder(BasePageBuilder):
    """Builds renderkit-summary.html, one table row per renderer grouped by family."""

    template_name = SUMMARY_FILENAME

    def build(self, render_kit: RenderKit, family_group: Optional[FamilyGroup] = None) -> GeneratedPage:
        if family_group is None:
            family_group = group_by_family(render_kit)

        families = {
            family: [self._summary_row(renderer) for renderer in renderers]
            for family, renderers in family_group.items()
        }
        html = self._render(
            stylesheet_href="../stylesheet.css",
            description=render_kit.description_text(""),
            families=families,
        )
        self.logger.info("Summary table generated", families=len(families), html_length=len(html))
        return GeneratedPage(filename=SUMMARY_FILENAME, html=html)

    def _summary_row(self, renderer: Renderer) -> Dict[str, str]:
        description = renderer.description_text("")
        summary = ""
        if description:
            summary = first_sentence(
                description,
                owner=f"Description of renderer {renderer.component_family}/{renderer.renderer_type}",
            )
        return {
            "renderer_type": renderer.renderer_type,
            "href": renderer.page_filename,
            "summary": summary,
        }


class DetailPageBuilder(BasePageBuilder):
    """Builds one page per renderer documenting its children policy and attributes."""

    template_name = "renderer.html"

    def build(self, render_kit: RenderKit, family_group: Optional[FamilyGroup] = None) -> List[GeneratedPage]:
        pages = [self.build_page(renderer) for renderer in checked_renderers(render_kit)]
        self.logger.info("Detail pages generated", pages=len(pages))
        return pages

    def build_page(self, renderer: Renderer) -> GeneratedPage:
        """
        Build the detail page of one renderer.

        Raises:
            InputConsistencyError: If the renderer's attribute list is missing
        """
        if renderer.attributes is None:
            raise InputConsistencyError(
                f"null attributes for renderer {renderer.component_family}/{renderer.renderer_type}"
            )

        family, renderer_type = renderer.key
        attributes = [
            {
                "name": attribute.name,
                "pass_through": "true" if attribute.pass_through else "false",
                "attribute_class": attribute.attribute_class,
                "description": attribute.description_text(""),
                "default_value": (
                    UNDEFINED_DEFAULT_VALUE
                    if attribute.default_value is None
                    else attribute.default_value
                ),
            }
            for attribute in renderer.attributes
            if not attribute.ignored_by_renderer
        ]

        html = self._render(
            stylesheet_href="../stylesheet.css",
            component_family=family,
            renderer_type=renderer_type,
            page_title=f"component-family: {family} renderer-type: {renderer_type}",
            description=renderer.description_text(""),
            children_sentence=(
                RENDERS_CHILDREN_SENTENCE
                if renderer.renders_children
                else NOT_RENDERS_CHILDREN_SENTENCE
            ),
            has_attributes=len(renderer.attributes) > 0,
            attributes=attributes,
            no_attributes_sentence=NO_ATTRIBUTES_SENTENCE,
        )
        return GeneratedPage(filename=renderer.page_filename, html=html)
