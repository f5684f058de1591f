"""Cassettes — declarative YAML stub definitions.

A cassette is a YAML list of request/response pairs. ``load_cassette``
accepts one file or a directory of files and returns Routes in the
order they should be registered.
"""

from webmock.cassette.loader import (
    load_cassette,
    load_cassette_dir,
    load_cassette_file,
    parse_cassette,
)
from webmock.cassette.schema import CassetteEntry, CassetteRequest, CassetteResponse

__all__ = [
    "CassetteEntry",
    "CassetteRequest",
    "CassetteResponse",
    "load_cassette",
    "load_cassette_dir",
    "load_cassette_file",
    "parse_cassette",
]
