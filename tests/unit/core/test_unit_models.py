# tests/unit/core/test_unit_models.py — v2
"""Tests for core/models.py — ReadmeFile sentinel and outcomes."""

from __future__ import annotations

import pytest

from readmekit.core.models import (
    NOT_FOUND_PLACEHOLDER,
    CandidateFile,
    Found,
    NotFound,
    ReadmeFile,
)


class TestReadmeFile:
    def test_sentinel_shape(self):
        sentinel = ReadmeFile.not_found()
        assert sentinel.name == NOT_FOUND_PLACEHOLDER
        assert sentinel.type == ""
        assert sentinel.content == ""
        assert sentinel.is_not_found is True

    def test_real_readme_is_not_sentinel(self):
        readme = ReadmeFile(name="README.md", type="text/markdown", content="# Hi")
        assert readme.is_not_found is False

    def test_frozen(self):
        readme = ReadmeFile(name="README.md", type="text/markdown", content="# Hi")
        with pytest.raises(Exception):
            readme.content = "changed"  # type: ignore[misc]

    def test_roundtrip_dict(self):
        readme = ReadmeFile(name="README", type="text/plain", content="x")
        assert ReadmeFile.model_validate(readme.model_dump()) == readme


class TestOutcomes:
    def test_found_holds_readme(self):
        readme = ReadmeFile(name="README", type="text/plain", content="x")
        assert Found(readme).readme is readme

    def test_not_found_default_tried(self):
        assert NotFound().tried == ()

    def test_candidate_hashable(self):
        c = CandidateFile(name="README.md", content_type="text/markdown")
        assert c in {c}
