"""Shared test fixtures for semdb tests."""

import pytest

from semdb.model import Database, EntityKind, make_entity


@pytest.fixture
def sample_entities():
    """Entities of a small OCaml-like project.

    0 parse_file   <- example use: 3 (test_parse_file)
    1 Parser
    2 Parser.run
    3 test_parse_file
    """
    return [
        make_entity(
            EntityKind.FUNCTION, "parse_file", "lib/parse.ml", 12, 0,
            full_name="Parse.parse_file", external_users=7, example_uses=[3],
        ),
        make_entity(EntityKind.CLASS, "Parser", "lib/parse.ml", 30, 0, external_users=4),
        make_entity(
            EntityKind.METHOD, "run", "lib/parse.ml", 34, 2,
            full_name="Parser.run", external_users=2,
        ),
        make_entity(EntityKind.FUNCTION, "test_parse_file", "tests/test_parse.ml", 5, 0),
    ]


@pytest.fixture
def sample_db(sample_entities):
    """Database holding ``sample_entities``."""
    return Database(
        root="/home/dev/project",
        dirs=[("lib", 11), ("tests", 0)],
        files=[("lib/parse.ml", 11), ("tests/test_parse.ml", 0)],
        entities=sample_entities,
    )
