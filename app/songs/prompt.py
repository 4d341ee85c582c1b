from __future__ import annotations

from app.core.llm.prompt_template import PromptTemplate

SYSTEM_PROMPT = "You are a music expert."

DEFAULT_YEAR = "1984"

TOP_SONG_QUESTION = "What was the Billboard number one year-end top 100 single for {year}?"

TOP_SONG_OBJECT_TEMPLATE = TOP_SONG_QUESTION + "\n{format}\n"

FIXED_TOP_SONG_PROMPT = PromptTemplate(TOP_SONG_QUESTION).render({"year": DEFAULT_YEAR})


def build_top_song_prompt(*, year: str) -> str:
    """Question for a given year; `year` is inserted as-is (no numeric check)."""

    return PromptTemplate(TOP_SONG_QUESTION).add("year", year).render()


def build_top_song_object_prompt(*, year: int, format_instructions: str) -> str:
    """Question for a given year followed by the machine-readable format instruction."""

    return PromptTemplate(TOP_SONG_OBJECT_TEMPLATE).render(
        {"year": year, "format": format_instructions}
    )
