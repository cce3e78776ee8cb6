"""Playlist demonstration of the aggregate/iterator contract."""

import logging
import sys
from typing import TextIO

from .config import DemoConfiguration
from .domain import ListAggregate
from .traversal import drain


def run(config: DemoConfiguration, stream: TextIO) -> int:
    """Build the playlist, then write the header and each track to ``stream``.

    Returns:
        The number of tracks written.
    """
    playlist = ListAggregate[str]()
    for track in config.tracks:
        playlist.append(track)

    tracks = playlist.create_iterator()
    stream.write(f"{config.header}\n")
    return drain(tracks, lambda track: stream.write(f"{track}\n"))


def main() -> int:
    config = DemoConfiguration()
    logging.basicConfig(level=config.log_level)
    run(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
