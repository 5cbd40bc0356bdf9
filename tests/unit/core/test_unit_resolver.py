# tests/unit/core/test_unit_resolver.py — v1
"""Tests for core/resolver.py — ordered probing and symlink handling."""

from __future__ import annotations

import pytest

from readmekit.core.candidates import build_candidates
from readmekit.core.errors import DanglingSymlinkError, FetchError
from readmekit.core.models import Found, NotFound
from readmekit.core.resolver import ReadmeResolver, resolve_readme

BASE = "https://github.com/acme/service/tree/main/"


def _url(name: str) -> str:
    return f"{BASE}{name}"


class TestResolveReadme:
    @pytest.mark.asyncio
    async def test_stops_at_first_success(self, reader, github):
        candidates = build_candidates(["A.md", "B.md", "C.md"])
        reader.files[_url("B.md")] = b"# B"
        reader.files[_url("C.md")] = b"# C"

        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)

        assert reader.calls == [_url("A.md"), _url("B.md")]
        assert isinstance(outcome, Found)
        assert outcome.readme.name == "B.md"
        assert outcome.readme.type == "text/markdown"
        assert outcome.readme.content == "# B"

    @pytest.mark.asyncio
    async def test_not_found_lists_tried_names(self, reader, github):
        candidates = build_candidates(["README.md", "README"])
        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)
        assert isinstance(outcome, NotFound)
        assert outcome.tried == ("README.md", "README")
        assert len(reader.calls) == 2

    @pytest.mark.asyncio
    async def test_empty_candidate_list(self, reader, github):
        outcome = await resolve_readme(BASE, (), github, reader.read_url)
        assert isinstance(outcome, NotFound)
        assert reader.calls == []

    @pytest.mark.asyncio
    async def test_other_error_aborts(self, reader, github):
        candidates = build_candidates(["A.md", "B.md"])
        reader.files[_url("A.md")] = FetchError(_url("A.md"), "boom", status_code=500)
        reader.files[_url("B.md")] = b"# B"

        with pytest.raises(FetchError) as exc_info:
            await resolve_readme(BASE, candidates, github, reader.read_url)

        assert exc_info.value.status_code == 500
        assert reader.calls == [_url("A.md")]

    @pytest.mark.asyncio
    async def test_symlink_followed_once(self, reader, github):
        candidates = build_candidates(["README.md"])
        reader.files[_url("README.md")] = b"other/README.md\n"
        reader.files[_url("other/README.md")] = b"# Real readme"

        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)

        assert reader.calls == [_url("README.md"), _url("other/README.md")]
        assert isinstance(outcome, Found)
        assert outcome.readme.content == "# Real readme"
        assert outcome.readme.name == "README.md"

    @pytest.mark.asyncio
    async def test_symlink_not_followed_twice(self, reader, github):
        candidates = build_candidates(["README.md"])
        reader.files[_url("README.md")] = b"a.md"
        reader.files[_url("a.md")] = b"b.md"

        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)

        assert len(reader.calls) == 2
        assert outcome.readme.content == "b.md"

    @pytest.mark.asyncio
    async def test_dangling_symlink_is_hard_error(self, reader, github):
        candidates = build_candidates(["README.md", "README"])
        reader.files[_url("README.md")] = b"missing/README.md"
        reader.files[_url("README")] = b"fallback"

        with pytest.raises(DanglingSymlinkError, match="missing/README.md"):
            await resolve_readme(BASE, candidates, github, reader.read_url)

        assert _url("README") not in reader.calls

    @pytest.mark.asyncio
    async def test_blank_body_counts_as_absent(self, reader, github):
        candidates = build_candidates(["README.md", "README.txt"])
        reader.files[_url("README.md")] = b"  \n"
        reader.files[_url("README.txt")] = b"plain"

        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)

        assert outcome.readme.name == "README.txt"
        assert outcome.readme.type == "text/plain"

    @pytest.mark.asyncio
    async def test_utf8_decoding(self, reader, github):
        candidates = build_candidates(["README.md"])
        reader.files[_url("README.md")] = "Café ☕".encode("utf-8")
        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)
        assert outcome.readme.content == "Café ☕"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        b"http://169.254.169.254/latest/secret.txt",
        b"https://github.com/other/repo/blob/main/README.md",
    ])
    async def test_absolute_url_body_not_followed(self, reader, github, body):
        candidates = build_candidates(["README.md"])
        reader.files[_url("README.md")] = body
        reader.files[body.decode()] = b"TOP SECRET"

        outcome = await resolve_readme(BASE, candidates, github, reader.read_url)

        assert reader.calls == [_url("README.md")]
        assert isinstance(outcome, Found)
        assert outcome.readme.content == body.decode()


class TestReadmeResolver:
    @pytest.mark.asyncio
    async def test_uses_reader_and_candidates(self, reader, github):
        reader.files[_url("README")] = b"hello"
        resolver = ReadmeResolver(reader, build_candidates(["README.md", "README"]))

        outcome = await resolver.resolve(BASE, github)

        assert isinstance(outcome, Found)
        assert outcome.readme.name == "README"
        assert [c.name for c in resolver.candidates] == ["README.md", "README"]

    @pytest.mark.asyncio
    async def test_symlink_threshold_passed_through(self, reader, github):
        reader.files[_url("README.md")] = b"docs/README.md"
        resolver = ReadmeResolver(reader, build_candidates(["README.md"]), symlink_max_length=5)

        outcome = await resolver.resolve(BASE, github)

        assert outcome.readme.content == "docs/README.md"
        assert len(reader.calls) == 1
