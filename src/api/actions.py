# src/api/actions.py — v1
"""Tool actions for AI/LLM integrations.

Actions are registered by name and invoked with a raw JSON payload that is
validated against the action's input model.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from readmekit.api.models import GetReadmeInput, GetReadmeOutput
from readmekit.api.service import ReadmeService
from readmekit.core.candidates import MARKDOWN
from readmekit.core.markdown import strip_markdown
from readmekit.logging.context import set_request_context

logger = logging.getLogger(__name__)


class ActionError(Exception):
    """Raised when an action is unknown or registered twice."""


class BaseAction(ABC):
    """A named, typed operation exposed to tool-calling clients."""

    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]

    @abstractmethod
    async def run(self, payload: BaseModel) -> BaseModel:
        """Execute with a validated input model."""

    def schema(self) -> dict[str, Any]:
        """JSON schemas of input and output, for tool discovery."""
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "input": self.input_model.model_json_schema(by_alias=True),
            "output": self.output_model.model_json_schema(by_alias=True),
        }


class GetReadmeAction(BaseAction):
    """Retrieve the README content of a catalog entity."""

    name = "get-readme-content"
    title = "Get README Content"
    description = (
        "Retrieves the README content for a catalog entity. Use this to get "
        "documentation, setup instructions, or general information about a "
        "component, API, system, or other entity. Returns the raw README "
        "content in its original format (markdown, plain text, or "
        "reStructuredText)."
    )
    input_model = GetReadmeInput
    output_model = GetReadmeOutput

    def __init__(self, service: ReadmeService) -> None:
        self._service = service

    async def run(self, payload: BaseModel) -> GetReadmeOutput:
        if not isinstance(payload, GetReadmeInput):
            raise TypeError(
                f"{self.name} expects GetReadmeInput, got {type(payload).__name__}"
            )
        set_request_context(payload.entity_ref)
        logger.debug("Fetching README for entity: %s", payload.entity_ref)

        result = await self._service.get_readme(payload.entity_ref)
        readme = result.readme
        content = readme.content
        if payload.strip_markdown and readme.type == MARKDOWN:
            content = strip_markdown(content)

        return GetReadmeOutput(
            entity_ref=result.entity_ref,
            content=content,
            content_type=readme.type,
            file_name=readme.name,
        )


class ActionRegistry:
    """Registry of actions available to tool-calling clients."""

    def __init__(self) -> None:
        self._actions: dict[str, BaseAction] = {}

    @property
    def action_names(self) -> list[str]:
        return sorted(self._actions)

    def register(self, action: BaseAction) -> None:
        if action.name in self._actions:
            raise ActionError(f"Action '{action.name}' is already registered")
        self._actions[action.name] = action
        logger.debug("Registered action: %s", action.name)

    def get(self, name: str) -> BaseAction | None:
        return self._actions.get(name)

    async def invoke(self, name: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Validate payload, run the action and return its output by alias.

        Raises:
            ActionError: If no action is registered under name.
            pydantic.ValidationError: If payload does not match the input model.
        """
        action = self._actions.get(name)
        if action is None:
            raise ActionError(f"Action '{name}' not found in registry")
        validated = action.input_model.model_validate(payload)
        output = await action.run(validated)
        return output.model_dump(by_alias=True)
