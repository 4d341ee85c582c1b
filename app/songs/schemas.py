from __future__ import annotations

from pydantic import BaseModel, Field


class TopSong(BaseModel):
    """Billboard year-end number-one single, as reported by the model."""

    title: str = Field(description="Song title.", examples=["Wrecking Ball"])
    artist: str = Field(description="Performing artist.", examples=["Miley Cyrus"])
    album: str = Field(description="Album the single was released on.", examples=["Bangerz"])
    year: int = Field(description="Chart year.", examples=[2013])
