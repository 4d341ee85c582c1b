from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class PromptTemplateError(KeyError):
    """Raised when a template placeholder has no bound value."""


class PromptTemplate:
    """
    Text with `{name}` placeholders, rendered by plain substitution.

    - Values are converted with `str()` and inserted verbatim; their content is never
      re-scanned, so JSON (e.g. a format instruction) can be substituted safely.
    - Braces that do not form a `{identifier}` placeholder are left untouched.
    - Every placeholder must be bound at render time.
    """

    def __init__(self, template: str):
        self._template = template
        self._params: dict[str, Any] = {}

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self) -> list[str]:
        seen: list[str] = []
        for m in _PLACEHOLDER_RE.finditer(self._template):
            if m.group(1) not in seen:
                seen.append(m.group(1))
        return seen

    def add(self, name: str, value: Any) -> PromptTemplate:
        self._params[name] = value
        return self

    def render(self, params: Mapping[str, Any] | None = None) -> str:
        values = {**self._params, **(params or {})}
        missing = [name for name in self.placeholders if name not in values]
        if missing:
            raise PromptTemplateError(
                f"Missing values for template placeholders: {', '.join(missing)}"
            )
        return _PLACEHOLDER_RE.sub(lambda m: str(values[m.group(1)]), self._template)
