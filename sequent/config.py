"""Demo configuration."""

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_TRACKS = [
    "🤠 Wheeler Walker Jr. - Redneck Shit",
    "🤘 Morbid Angel - Lion's Den",
    "🎤 Open Mike Eagle - The Black Mirror Episode",
]


class DemoConfiguration(BaseModel):
    """Settings for the playlist demonstration.

    The defaults are the fixed demo: a header line followed by three tracks.
    Nothing is read from the environment, so the command-line demo always
    prints the same output. Other values can only be passed explicitly, for
    example from tests.

    Attributes:
        header: Line written before the tracks.
        tracks: Items appended to the playlist, in order.
        log_level: Root logging level used by the demo entry point.
    """

    header: str = "My Playlist:"
    tracks: list[str] = Field(default_factory=lambda: list(DEFAULT_TRACKS))
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
