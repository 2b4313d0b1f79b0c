"""Verbose and compact JSON encodings of entities and databases."""

from .base import EntityCodec, JsonValue
from .compact import CompactCodec
from .database import decode_database, encode_database
from .verbose import VerboseCodec

CODECS: dict[str, EntityCodec] = {
    VerboseCodec.name: VerboseCodec(),
    CompactCodec.name: CompactCodec(),
}


def get_codec(name: str) -> EntityCodec:
    """Look up an entity codec by name ("verbose" or "compact")."""
    try:
        return CODECS[name]
    except KeyError:
        raise ValueError(f"Unknown codec {name!r}, expected one of {sorted(CODECS)}") from None


__all__ = [
    "EntityCodec",
    "JsonValue",
    "CompactCodec",
    "VerboseCodec",
    "CODECS",
    "get_codec",
    "encode_database",
    "decode_database",
]
