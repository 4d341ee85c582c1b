"""Structured output conversion.

The model is asked to answer in JSON matching a pydantic model's JSON Schema (the
`format` instruction is appended to the user prompt), and the reply text is then
validated back into that model. Single pass: no repair, no retry.
"""

from __future__ import annotations

import json
import re
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from app.domain.exceptions import StructuredOutputError

ModelT = TypeVar("ModelT", bound=BaseModel)

_FENCE_RE = re.compile(r"^```[A-Za-z0-9_-]*\s*\n?(.*?)\n?\s*```$", re.DOTALL)

_FORMAT_TEMPLATE = """Your response should be in JSON format.
Do not include any explanations, only provide a RFC8259 compliant JSON response following this format without deviation.
Do not include markdown code blocks in your response.
Here is the JSON Schema instance your output must adhere to:
{schema}"""


def strip_code_fence(text: str) -> str:
    """Remove one surrounding markdown code fence (``` or ```json), if present."""

    stripped = text.strip()
    m = _FENCE_RE.match(stripped)
    if m is None:
        return stripped
    return m.group(1).strip()


class StructuredOutputConverter(Generic[ModelT]):
    def __init__(self, model_type: type[ModelT]):
        self._model_type = model_type

    @property
    def model_type(self) -> type[ModelT]:
        return self._model_type

    @property
    def json_schema(self) -> str:
        return json.dumps(self._model_type.model_json_schema(), indent=2)

    @property
    def format(self) -> str:
        return _FORMAT_TEMPLATE.format(schema=self.json_schema)

    def convert(self, text: str | None) -> ModelT:
        if text is None or not text.strip():
            raise StructuredOutputError("LLM output was empty")

        try:
            return self._model_type.model_validate_json(strip_code_fence(text))
        except ValidationError as exc:
            raise StructuredOutputError(
                f"LLM output did not match {self._model_type.__name__}"
            ) from exc
