"""
Pydantic Models and Schemas
===========================

Config Tree models describing render-kits, plus the derived records a generation
run produces. Config Tree models are frozen: generation never mutates its input.
"""

from typing import Optional, List, Dict
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from renderkitdoc.config.settings import Settings, get_settings


# Enums
class WrapperKind(str, Enum):
    """Markup wrappers recognised inside description text."""
    DIV = "div"
    SPAN = "span"


class FileKind(str, Enum):
    """Kinds of filesystem entries touched by a generation run."""
    DIRECTORY = "directory"
    COPIED_ASSET = "copied-asset"
    GENERATED_DOCUMENT = "generated-document"


# Base Models
class ConfigTreeModel(BaseModel):
    """Base model for read-only Config Tree nodes."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# Config Tree Models
class Description(ConfigTreeModel):
    """Localized free text; may embed raw markup."""
    lang: Optional[str] = Field(None, description="Language tag, None or empty for default")
    text: str = Field("", description="Raw description body")


class DescribedModel(ConfigTreeModel):
    """Config Tree node carrying per-language descriptions."""
    descriptions: List[Description] = Field(
        default_factory=list, description="Descriptions in stored order"
    )

    def description(self, lang: Optional[str] = "") -> Optional[Description]:
        """
        Look up the description for a language tag.

        An empty or None tag addresses the default (unlocalized) description.
        """
        wanted = lang or ""
        for candidate in self.descriptions:
            if (candidate.lang or "") == wanted:
                return candidate
        return None

    def description_text(self, lang: Optional[str] = "") -> str:
        """Return the description body for a language tag, empty when absent."""
        found = self.description(lang)
        return "" if found is None else found.text


class Attribute(DescribedModel):
    """Named, typed configuration value accepted by a renderer."""
    name: str = Field(..., min_length=1, description="Attribute name")
    attribute_class: str = Field(..., alias="attributeClass", description="Declared type name")
    default_value: Optional[str] = Field(None, alias="defaultValue")
    ignored_by_renderer: bool = Field(False, alias="ignoredByRenderer")
    pass_through: bool = Field(False, alias="passThrough")


class Renderer(DescribedModel):
    """How one component kind is drawn; keyed by (component_family, renderer_type)."""
    component_family: str = Field(..., min_length=1, alias="componentFamily")
    renderer_type: str = Field(..., min_length=1, alias="rendererType")
    renders_children: bool = Field(False, alias="rendersChildren")
    attributes: List[Attribute] = Field(default_factory=list, description="Declared attributes")

    @property
    def key(self) -> tuple[str, str]:
        return self.component_family, self.renderer_type

    @property
    def page_filename(self) -> str:
        """Detail page filename: family and type concatenated."""
        return f"{self.component_family}{self.renderer_type}.html"


class RenderKit(DescribedModel):
    """Named collection of renderer definitions."""
    id: str = Field(..., min_length=1, description="Render-kit identifier")
    renderers: List[Renderer] = Field(default_factory=list, description="Renderers in order")


class FacesConfig(ConfigTreeModel):
    """Root of the Config Tree: all render-kits in definition order."""
    render_kits: List[RenderKit] = Field(default_factory=list, alias="renderKits")

    def render_kit(self, render_kit_id: str) -> Optional[RenderKit]:
        """Find a render-kit by identifier."""
        for kit in self.render_kits:
            if kit is not None and kit.id == render_kit_id:
                return kit
        return None


# Derived Models
FamilyGroup = Dict[str, List[Renderer]]


class WrapperTag(BaseModel):
    """First opening div/span tag found in a description."""
    kind: WrapperKind = Field(..., description="Tag kind")
    text: str = Field(..., description="Opening tag text, verbatim")
    start: int = Field(..., ge=0, description="Offset of the tag in the source text")

    @property
    def closing_tag(self) -> str:
        return f"</{self.kind.value}>"


class RunConfig(BaseModel):
    """Explicit per-run configuration replacing ambient locale and version state."""
    model_config = ConfigDict(frozen=True)

    active_locale_country_code: str = Field("", description="Active locale country code")
    version_string: Optional[str] = Field(None, description="Version shown next to titles")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RunConfig":
        """Build run configuration from the process-wide settings."""
        settings = settings or get_settings()
        return cls(
            active_locale_country_code=settings.locale_country_code,
            version_string=settings.impl_version_number,
        )


class GeneratedPage(BaseModel):
    """One generated HTML document."""
    filename: str = Field(..., min_length=1, description="Target file name")
    html: str = Field(..., description="Document text")


class TouchedFile(BaseModel):
    """A filesystem path created, copied or written during a run."""
    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Filesystem path")
    kind: FileKind = Field(..., description="Logical kind of the entry")


# Loading Results
class LoadResult(BaseModel):
    """Result of loading a Config Tree document."""
    success: bool = Field(..., description="Whether loading succeeded")
    config: Optional[FacesConfig] = Field(None, description="Loaded Config Tree")
    errors: List[str] = Field(default_factory=list, description="Loading errors")
    warnings: List[str] = Field(default_factory=list, description="Loading warnings")
