# tests/unit/api/test_unit_actions.py — v1
"""Tests for api/actions.py — the get-readme-content action and registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from readmekit.api.actions import ActionError, ActionRegistry, GetReadmeAction
from readmekit.api.models import GetReadmeOutput
from readmekit.core.errors import ReadmeNotFoundError

BASE = "https://github.com/acme/service/tree/main/"


@pytest.fixture
def registry(service) -> ActionRegistry:
    registry = ActionRegistry()
    registry.register(GetReadmeAction(service))
    return registry


class TestGetReadmeAction:
    @pytest.mark.asyncio
    async def test_returns_raw_content(self, registry, reader):
        reader.files[BASE + "README.md"] = b"# Hello\n\nSome **bold** text."

        output = await registry.invoke("get-readme-content", {"entityRef": "service"})

        assert output == {
            "entityRef": "component:default/service",
            "content": "# Hello\n\nSome **bold** text.",
            "contentType": "text/markdown",
            "fileName": "README.md",
        }

    @pytest.mark.asyncio
    async def test_strip_markdown(self, registry, reader):
        reader.files[BASE + "README.md"] = b"# Hello\n\nSome **bold** text."

        output = await registry.invoke(
            "get-readme-content", {"entityRef": "service", "stripMarkdown": True}
        )

        assert output["content"] == "Hello Some bold text."
        assert output["contentType"] == "text/markdown"

    @pytest.mark.asyncio
    async def test_strip_ignored_for_non_markdown(self, registry, reader):
        reader.files[BASE + "README.txt"] = b"**not markdown**"

        output = await registry.invoke(
            "get-readme-content", {"entityRef": "service", "stripMarkdown": True}
        )

        assert output["content"] == "**not markdown**"
        assert output["contentType"] == "text/plain"

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, registry):
        with pytest.raises(ReadmeNotFoundError):
            await registry.invoke("get-readme-content", {"entityRef": "service"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"entityRef": ""}, {"entityRef": 5}])
    async def test_invalid_payload(self, registry, payload):
        with pytest.raises(ValidationError):
            await registry.invoke("get-readme-content", payload)

    @pytest.mark.asyncio
    async def test_run_rejects_other_models(self, service):
        wrong = GetReadmeOutput(
            entity_ref="component:default/service",
            content="x",
            content_type="text/plain",
            file_name="README",
        )
        with pytest.raises(TypeError, match="expects GetReadmeInput"):
            await GetReadmeAction(service).run(wrong)

    def test_schema_uses_aliases(self, service):
        schema = GetReadmeAction(service).schema()
        assert schema["name"] == "get-readme-content"
        assert set(schema["input"]["properties"]) == {"entityRef", "stripMarkdown"}
        assert schema["input"]["required"] == ["entityRef"]
        assert set(schema["output"]["properties"]) == {
            "entityRef", "content", "contentType", "fileName",
        }


class TestActionRegistry:
    def test_duplicate_registration(self, registry, service):
        with pytest.raises(ActionError, match="already registered"):
            registry.register(GetReadmeAction(service))

    @pytest.mark.asyncio
    async def test_unknown_action(self, registry):
        with pytest.raises(ActionError, match="not found"):
            await registry.invoke("nope", {})

    def test_lookup(self, registry):
        assert registry.action_names == ["get-readme-content"]
        assert registry.get("get-readme-content") is not None
        assert registry.get("nope") is None
