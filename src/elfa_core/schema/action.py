"""Action descriptor model: the immutable definition behind each Elfa action."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

FieldType = Literal["string", "number", "boolean"]
Primitive = Union[bool, int, float, str]


class FieldSpec(BaseModel):
    """One entry of an extraction schema."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    type: FieldType
    description: str = ""
    required: bool = False
    default: Primitive | None = Field(
        default=None,
        description="Query value used when the field is absent from the extraction.",
    )
    example: Primitive | None = None
    min_length: int | None = Field(default=None, ge=0)


class ActionExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: str
    agent: str


class ActionDescriptor(BaseModel):
    """
    Tagged data describing one endpoint action.

    The generic orchestrator reads everything it needs from here: the schema
    to extract, the path to call, the defaults to fill and the text used in
    prompts and user-facing messages. Message templates are `str.format`
    strings over the resolved query parameters.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    similes: tuple[str, ...] = ()
    description: str
    path: str = Field(..., pattern=r"^/")
    fields: tuple[FieldSpec, ...] = ()

    schema_name: str = ""
    schema_description: str = ""
    extraction_subject: str = ""
    summary_instruction: str | None = None

    success_text: str
    failure_text: str
    invalid_text: str = "Unable to process the request. Invalid content provided."
    invalid_error: str = "Invalid content"
    examples: tuple[ActionExample, ...] = ()

    @property
    def requires_extraction(self) -> bool:
        return bool(self.fields)

    @property
    def summarizes(self) -> bool:
        return self.summary_instruction is not None

    @property
    def defaults(self) -> dict[str, Any]:
        return {spec.name: spec.default for spec in self.fields if spec.default is not None}

    def resolve_query(self, extracted: Mapping[str, Any]) -> dict[str, Any]:
        """Schema fields in declaration order, defaults substituted for absent ones."""
        query: dict[str, Any] = {}
        for spec in self.fields:
            value = extracted.get(spec.name)
            if value is None:
                value = spec.default
            if value is not None:
                query[spec.name] = value
        return query

    def example_object(self) -> dict[str, Any]:
        return {
            spec.name: spec.example if spec.example is not None else spec.default
            for spec in self.fields
        }

    def render(self, template: str, query: Mapping[str, Any]) -> str:
        return template.format_map(dict(query))
