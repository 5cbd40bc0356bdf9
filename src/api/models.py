# src/api/models.py — v2
"""API-level models for the get-readme-content action and HTTP responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GetReadmeInput(BaseModel):
    """Input of the get-readme-content action."""

    model_config = ConfigDict(populate_by_name=True)

    entity_ref: str = Field(
        alias="entityRef",
        min_length=1,
        description=(
            'Entity reference in format "kind:namespace/name" (e.g., '
            '"component:default/my-service", "api:default/user-api"). '
            'Can also be just "namespace/name" for components.'
        ),
    )
    strip_markdown: bool = Field(
        default=False,
        alias="stripMarkdown",
        description=(
            "If true, removes markdown formatting and returns plain text. "
            "Useful for AI processing."
        ),
    )


class GetReadmeOutput(BaseModel):
    """Output of the get-readme-content action."""

    model_config = ConfigDict(populate_by_name=True)

    entity_ref: str = Field(alias="entityRef", description="The full entity reference")
    content: str = Field(description="The README file content")
    content_type: str = Field(
        alias="contentType",
        description='MIME type of the content (e.g., "text/markdown", "text/plain")',
    )
    file_name: str = Field(
        alias="fileName",
        description='Name of the README file (e.g., "README.md", "README.rst")',
    )


class HttpResponse(BaseModel):
    """Transport-neutral HTTP response."""

    status: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str
