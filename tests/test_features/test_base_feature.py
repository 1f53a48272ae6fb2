"""Tests for the shared feature plumbing (react_scaffolding.features.base)."""

from __future__ import annotations

from pathlib import Path

import pytest

from react_scaffolding.config import FeatureSelection
from react_scaffolding.features import FEATURES, Feature, RtkQueryFeature, ShadcnFeature
from react_scaffolding.features.base import src_path

pytestmark = pytest.mark.unit


class TestFeatureRegistry:
    def test_order(self):
        assert [cls.key for cls in FEATURES] == [
            "tailwind",
            "shadcn",
            "redux",
            "rtk_query",
            "i18n",
            "router",
            "react_hook_form",
            "header",
        ]

    def test_every_key_is_a_selection_field(self):
        assert {cls.key for cls in FEATURES} == set(FeatureSelection.model_fields)

    def test_requirements_precede_dependents(self):
        keys = [cls.key for cls in FEATURES]
        for cls in FEATURES:
            for required in cls.requires:
                assert keys.index(required) < keys.index(cls.key)


class TestFeatureBase:
    def test_missing_requirements(self, renderer, mock_npm, injector):
        shadcn = ShadcnFeature(renderer, mock_npm, injector)
        assert shadcn.missing_requirements(FeatureSelection(tailwind=False)) == ["tailwind"]
        assert shadcn.missing_requirements(FeatureSelection()) == []

        rtk = RtkQueryFeature(renderer, mock_npm, injector)
        assert rtk.missing_requirements(FeatureSelection(redux=False)) == ["redux"]

    def test_context_flags(self, renderer, mock_npm, injector):
        feature = ShadcnFeature(renderer, mock_npm, injector)
        ctx = feature.context("demo", FeatureSelection(i18n=False), extra="x")
        assert ctx["project_name"] == "demo"
        assert ctx["has_i18n"] is False
        assert ctx["has_router"] is True
        assert ctx["extra"] == "x"

    async def test_setup_is_abstract(self, renderer, mock_npm, injector, tmp_path: Path):
        with pytest.raises(NotImplementedError):
            await Feature(renderer, mock_npm, injector).setup(tmp_path, FeatureSelection())

    def test_src_path(self, tmp_path: Path):
        assert src_path(tmp_path, "store", "store.ts") == tmp_path / "src" / "store" / "store.ts"
