"""
Unit Tests for Component Family Grouping
========================================

Tests for render-kit resolution and grouping renderers by component family.
"""

import pytest

from renderkitdoc.core.exceptions import InputConsistencyError, RenderKitNotFoundError
from renderkitdoc.core.grouping import checked_renderers, group_by_family, resolve_render_kit
from renderkitdoc.models.schemas import FacesConfig, RenderKit

from tests.utils.data_generators import RenderKitDataGenerator as gen


class TestResolveRenderKit:
    """Test render-kit lookup and fallback."""

    def test_resolves_requested_id(self):
        """Test the requested render-kit is returned when present."""
        first = gen.render_kit([gen.renderer("A", "a")], render_kit_id="FIRST")
        second = gen.render_kit([gen.renderer("B", "b")], render_kit_id="SECOND")
        config = FacesConfig(render_kits=[first, second])

        assert resolve_render_kit(config, "SECOND") is second

    def test_falls_back_to_first_defined(self):
        """Test an unknown id falls back to the first render-kit."""
        first = gen.render_kit([gen.renderer("A", "a")], render_kit_id="FIRST")
        second = gen.render_kit([gen.renderer("B", "b")], render_kit_id="SECOND")
        config = FacesConfig(render_kits=[first, second])

        assert resolve_render_kit(config, "MISSING") is first

    def test_no_render_kits_is_fatal(self):
        """Test a Config Tree without render-kits cannot be documented."""
        with pytest.raises(RenderKitNotFoundError):
            resolve_render_kit(FacesConfig(), "HTML_BASIC")


class TestGroupByFamily:
    """Test grouping renderers by component family."""

    def test_families_sorted_and_renderer_order_kept(self, html_basic_config):
        """Test family keys are sorted and renderers keep declaration order."""
        groups = group_by_family(html_basic_config.render_kits[0])

        assert list(groups) == ["javax.faces.Command", "javax.faces.Form", "javax.faces.Output"]
        assert [r.renderer_type for r in groups["javax.faces.Command"]] == [
            "javax.faces.Button",
            "javax.faces.Link",
        ]
        assert [r.renderer_type for r in groups["javax.faces.Output"]] == [
            "javax.faces.Text",
            "javax.faces.Label",
        ]

    def test_group_sizes_sum_to_renderer_count(self, html_basic_config):
        """Test every renderer lands in exactly one non-empty group."""
        render_kit = html_basic_config.render_kits[0]
        groups = group_by_family(render_kit)

        assert len(groups) == len({r.component_family for r in render_kit.renderers})
        assert sum(len(renderers) for renderers in groups.values()) == len(render_kit.renderers)
        assert all(groups.values())

    def test_sort_is_case_sensitive(self):
        """Test uppercase families sort before lowercase ones."""
        kit = gen.render_kit([
            gen.renderer("beta", "x"),
            gen.renderer("Alpha", "y"),
            gen.renderer("alpha", "z"),
        ])

        assert list(group_by_family(kit)) == ["Alpha", "alpha", "beta"]

    def test_empty_renderer_list_is_fatal(self):
        """Test a render-kit without renderers is rejected."""
        with pytest.raises(InputConsistencyError, match="No Renderers"):
            group_by_family(gen.render_kit([]))

    def test_null_renderer_entry_is_fatal(self):
        """Test a null renderer entry aborts grouping."""
        kit = RenderKit.model_construct(id="HTML_BASIC", renderers=[gen.renderer("A", "a"), None])

        with pytest.raises(InputConsistencyError, match="index: 1"):
            group_by_family(kit)

    def test_duplicate_renderer_key_is_fatal(self):
        """Test a duplicated (family, type) pair aborts grouping."""
        kit = gen.render_kit([gen.renderer("A", "a"), gen.renderer("A", "a")])

        with pytest.raises(InputConsistencyError, match="Duplicate renderer"):
            checked_renderers(kit)

    def test_grouping_does_not_mutate_input(self, html_basic_config):
        """Test the Config Tree is unchanged by grouping."""
        render_kit = html_basic_config.render_kits[0]
        before = render_kit.model_dump()

        group_by_family(render_kit)

        assert render_kit.model_dump() == before
