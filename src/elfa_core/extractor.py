from __future__ import annotations

import json
from typing import Annotated, Any, Optional, Sequence, Union

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    create_model,
)

from elfa_core.errors import InvalidExtraction
from elfa_core.logging_utils import log_event
from elfa_core.protocols.brain import Brain
from elfa_core.schema.action import ActionDescriptor, FieldSpec
from elfa_core.schema.message import ConversationMessage

# Matches the default conversation window hosts keep for "recent messages".
DEFAULT_CONVERSATION_LENGTH = 32

EXTRACTION_TEMPLATE = """Respond with a JSON object containing only the extracted information:

Example response:
```json
{example}
```

{recent_messages}

Given the recent messages, extract the following information {subject}:
{field_lines}

Respond with a JSON object containing only the extracted information
"""


def format_recent_messages(
    messages: Sequence[ConversationMessage],
    limit: int = DEFAULT_CONVERSATION_LENGTH,
) -> str:
    window = list(messages)[-limit:] if limit > 0 else list(messages)
    return "\n".join(message.render() for message in window)


def compose_extraction_prompt(
    descriptor: ActionDescriptor,
    messages: Sequence[ConversationMessage],
) -> str:
    field_lines = "\n".join(
        f"- {spec.name}: {spec.description}".rstrip() for spec in descriptor.fields
    )
    subject = descriptor.extraction_subject or f"for {descriptor.name}"
    return EXTRACTION_TEMPLATE.format(
        example=json.dumps(descriptor.example_object(), indent=4),
        recent_messages=format_recent_messages(messages),
        subject=subject,
        field_lines=field_lines,
    )


def _annotation_for(spec: FieldSpec) -> Any:
    if spec.type == "boolean":
        return StrictBool
    if spec.type == "number":
        # StrictInt rejects bools, and listing it first keeps integers as ints.
        return Union[StrictInt, StrictFloat]
    if spec.min_length:
        return Annotated[StrictStr, StringConstraints(min_length=spec.min_length)]
    return StrictStr


def build_params_model(schema_name: str, fields: Sequence[FieldSpec]) -> type[BaseModel]:
    """
    Build a strict validation model for an extraction schema.

    Attributes are positional so field names like `from` stay legal; the
    public names live in the aliases.
    """
    definitions: dict[str, Any] = {}
    for index, spec in enumerate(fields):
        annotation = _annotation_for(spec)
        if spec.required:
            definitions[f"f{index}"] = (annotation, Field(..., alias=spec.name))
        else:
            definitions[f"f{index}"] = (Optional[annotation], Field(None, alias=spec.name))
    return create_model(
        schema_name or "ExtractionSchema",
        __config__=ConfigDict(extra="ignore"),
        **definitions,
    )


def _format_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        errors.append(f"{location}: {error.get('msg', 'invalid value')}")
    return errors


def _coerce_integral(spec: FieldSpec, value: Any) -> Any:
    # Whole-number floats go out as ints so query strings read "1738675001".
    if spec.type == "number" and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_extraction(
    schema_name: str,
    fields: Sequence[FieldSpec],
    candidate: Any,
) -> dict[str, Any]:
    """
    Check a model-produced candidate against its schema.

    Required fields must be present with the declared primitive type; optional
    fields may be absent or null but must match when present. Returns only the
    schema fields that carry a value.
    """
    if not isinstance(candidate, dict):
        raise InvalidExtraction(
            schema_name=schema_name,
            errors=[f"expected a JSON object, got {type(candidate).__name__}"],
        )

    model = build_params_model(schema_name, fields)
    try:
        validated = model.model_validate(candidate)
    except ValidationError as exc:
        raise InvalidExtraction(schema_name=schema_name, errors=_format_errors(exc)) from exc

    dumped = validated.model_dump(by_alias=True)
    return {
        spec.name: _coerce_integral(spec, dumped[spec.name])
        for spec in fields
        if dumped.get(spec.name) is not None
    }


class ParameterExtractor:
    """Turns the conversation into validated parameters with one model round-trip."""

    def __init__(self, brain: Brain) -> None:
        self._brain = brain

    async def extract(
        self,
        descriptor: ActionDescriptor,
        messages: Sequence[ConversationMessage],
    ) -> dict[str, Any]:
        prompt = compose_extraction_prompt(descriptor, messages)
        candidate = await self._brain.generate_object(
            prompt,
            fields=descriptor.fields,
            schema_name=descriptor.schema_name or descriptor.name,
            schema_description=descriptor.schema_description,
        )
        try:
            extracted = validate_extraction(
                descriptor.schema_name or descriptor.name,
                descriptor.fields,
                candidate,
            )
        except InvalidExtraction as exc:
            logger.warning(
                log_event("extract.invalid", action=descriptor.name, errors=len(exc.errors))
            )
            raise
        logger.debug(log_event("extract.ok", action=descriptor.name, keys=",".join(extracted)))
        return extracted
