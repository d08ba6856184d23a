"""
Component Family Grouping
=========================

Resolve the render-kit to document and partition its renderers by component
family. Families come out in sorted order; renderers keep their declaration
order inside each family.
"""

from collections import defaultdict
from typing import List, Set, Tuple

from renderkitdoc.config.logging import get_logger
from renderkitdoc.core.exceptions import InputConsistencyError, RenderKitNotFoundError
from renderkitdoc.models.schemas import FacesConfig, FamilyGroup, RenderKit, Renderer

logger = get_logger(__name__)


def resolve_render_kit(config: FacesConfig, render_kit_id: str) -> RenderKit:
    """
    Find the render-kit to document.

    Falls back to the first render-kit defined when the identifier is unknown.

    Raises:
        RenderKitNotFoundError: If the configuration defines no render-kit at all
    """
    render_kit = config.render_kit(render_kit_id)
    if render_kit is not None:
        return render_kit

    if not config.render_kits or config.render_kits[0] is None:
        logger.error("No render-kits defined", render_kit_id=render_kit_id)
        raise RenderKitNotFoundError(
            f"No RenderKit for id '{render_kit_id}' and no RenderKits defined"
        )

    fallback = config.render_kits[0]
    logger.warning(
        "Render-kit not found, using first defined",
        render_kit_id=render_kit_id,
        fallback_id=fallback.id,
    )
    return fallback


def checked_renderers(render_kit: RenderKit) -> List[Renderer]:
    """
    Return the render-kit's renderers after checking Config Tree invariants.

    Raises:
        InputConsistencyError: On a missing or empty renderer list, a null entry,
            or a duplicated (component-family, renderer-type) pair
    """
    renderers = render_kit.renderers
    if not renderers:
        raise InputConsistencyError(f"No Renderers for RenderKit id \"{render_kit.id}\"")

    seen: Set[Tuple[str, str]] = set()
    for index, renderer in enumerate(renderers):
        if renderer is None:
            raise InputConsistencyError(f"null Renderer at index: {index}")
        if renderer.key in seen:
            raise InputConsistencyError(
                f"Duplicate renderer {renderer.component_family}/{renderer.renderer_type} "
                f"in RenderKit \"{render_kit.id}\""
            )
        seen.add(renderer.key)

    return list(renderers)


def group_by_family(render_kit: RenderKit) -> FamilyGroup:
    """
    Group renderers by component family.

    Args:
        render_kit: Render-kit whose renderers are grouped

    Returns:
        Mapping of family name to renderers, keys in sorted order
    """
    groups: defaultdict[str, List[Renderer]] = defaultdict(list)
    for renderer in checked_renderers(render_kit):
        groups[renderer.component_family].append(renderer)

    result: FamilyGroup = {family: groups[family] for family in sorted(groups)}
    logger.debug(
        "Grouped renderers by component family",
        render_kit_id=render_kit.id,
        families=len(result),
    )
    return result
