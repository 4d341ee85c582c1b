from __future__ import annotations

import pytest

from app.core.llm.structured_output import StructuredOutputConverter
from app.songs.prompt import (
    FIXED_TOP_SONG_PROMPT,
    build_top_song_object_prompt,
    build_top_song_prompt,
)
from app.songs.schemas import TopSong


def test_fixed_prompt_asks_about_1984() -> None:
    assert FIXED_TOP_SONG_PROMPT == (
        "What was the Billboard number one year-end top 100 single for 1984?"
    )


@pytest.mark.parametrize("year", ["1984", "2013", "0", "abc", "{year}"])
def test_year_appears_once_right_before_question_mark(year: str) -> None:
    prompt = build_top_song_prompt(year=year)
    assert prompt.endswith(f" for {year}?")
    assert prompt.count(f" for {year}?") == 1


def test_object_prompt_appends_format_after_question() -> None:
    converter = StructuredOutputConverter(TopSong)
    prompt = build_top_song_object_prompt(year=2013, format_instructions=converter.format)

    assert prompt.startswith(
        "What was the Billboard number one year-end top 100 single for 2013?\n"
    )
    assert prompt.endswith(converter.format + "\n")
    # The schema's own braces must survive rendering untouched.
    assert converter.json_schema in prompt
