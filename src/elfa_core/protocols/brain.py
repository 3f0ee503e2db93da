"""Brain protocol: the language-model capabilities the pipeline depends on."""

from typing import Any, Protocol, Sequence, runtime_checkable

from elfa_core.schema.action import FieldSpec


@runtime_checkable
class Brain(Protocol):
    """
    Interface for the generation layer.

    Implementations typically call Gemini (or another LLM). Keeps model
    orchestration decoupled from extraction, dispatch and summarization.
    """

    async def generate_object(
        self,
        prompt: str,
        *,
        fields: Sequence[FieldSpec],
        schema_name: str,
        schema_description: str = "",
    ) -> Any:
        """
        Produce a candidate parameter object for the given schema.

        Args:
            prompt: Fully composed extraction instruction.
            fields: Field specs the object should follow.
            schema_name: Name of the schema, forwarded to the model.
            schema_description: Human-readable schema description.

        Returns:
            The decoded candidate; the caller validates it.
        """
        ...

    async def generate_text(self, prompt: str) -> str:
        """Produce free text for the prompt."""
        ...
