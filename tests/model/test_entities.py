"""Tests for the entity model (model/kinds.py, model/entities.py, model/database.py)."""

from __future__ import annotations

import pytest

from semdb.exceptions import InvalidEntityReference, UnknownEntityKind
from semdb.model import (
    Database,
    Entity,
    EntityKind,
    Position,
    check_entity_id,
    empty_database,
    make_entity,
)


class TestEntityKind:
    """Test the fixed kind codings."""

    def test_integer_codes_are_fixed(self):
        """The compact format depends on these exact numbers."""
        expected = {
            EntityKind.FUNCTION: 1,
            EntityKind.CLASS: 2,
            EntityKind.MODULE: 3,
            EntityKind.TYPE: 4,
            EntityKind.CONSTANT: 5,
            EntityKind.GLOBAL: 6,
            EntityKind.METHOD: 7,
            EntityKind.STATIC_METHOD: 8,
            EntityKind.FIELD: 9,
            EntityKind.FILE: 10,
            EntityKind.DIR: 11,
            EntityKind.MULTI_DIRS: 12,
            EntityKind.MACRO: 13,
        }
        assert {kind: kind.code for kind in EntityKind} == expected

    def test_from_int_inverts_code(self):
        for kind in EntityKind:
            assert EntityKind.from_int(kind.code) is kind

    def test_from_string_uses_member_names(self):
        assert EntityKind.from_string("StaticMethod") is EntityKind.STATIC_METHOD
        assert EntityKind.from_string("MultiDirs") is EntityKind.MULTI_DIRS

    @pytest.mark.parametrize("value", [0, 14, -1, True, "1", 1.0])
    def test_unknown_int_raises(self, value):
        with pytest.raises(UnknownEntityKind):
            EntityKind.from_int(value)

    @pytest.mark.parametrize("value", ["function", "Variable", "", 3])
    def test_unknown_string_raises(self, value):
        with pytest.raises(UnknownEntityKind):
            EntityKind.from_string(value)

    def test_short_names_are_unique_and_short(self):
        shorts = [kind.short for kind in EntityKind]
        assert len(set(shorts)) == len(shorts)
        assert all(1 <= len(s) <= 3 for s in shorts)
        assert EntityKind.FIELD.short == "Fld"

    def test_synthetic_kinds(self):
        synthetic = {k for k in EntityKind if k.is_synthetic}
        assert synthetic == {EntityKind.FILE, EntityKind.DIR, EntityKind.MULTI_DIRS}


class TestEntity:
    """Test identity immutability and the counter interface."""

    def test_identity_fields_cannot_be_reassigned(self):
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml")
        for attr, value in [
            ("kind", EntityKind.CLASS),
            ("name", "bar"),
            ("full_name", "A.bar"),
            ("file", "b.ml"),
            ("position", Position(2, 0)),
        ]:
            with pytest.raises(AttributeError):
                setattr(e, attr, value)
        assert e.kind is EntityKind.FUNCTION

    def test_increment_and_divide(self):
        e = make_entity(EntityKind.METHOD, "run", "a.ml", external_users=9)
        e.increment_external_users()
        e.increment_external_users(2)
        assert e.external_users == 12
        e.divide_external_users(5)
        assert e.external_users == 2

    def test_divide_by_zero_rejected(self):
        e = make_entity(EntityKind.METHOD, "run", "a.ml", external_users=9)
        with pytest.raises(ValueError):
            e.divide_external_users(0)

    def test_set_external_users_rejects_negative(self):
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml")
        e.set_external_users(4)
        assert e.external_users == 4
        with pytest.raises(ValueError):
            e.set_external_users(-1)

    def test_add_example_use(self):
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml")
        e.add_example_use(3)
        e.add_example_use(0)
        assert e.example_uses == [3, 0]
        with pytest.raises(InvalidEntityReference) as exc_info:
            e.add_example_use(-2)
        assert exc_info.value.size is None
        assert "size" not in str(exc_info.value)

    def test_display_name_prefers_full_name(self):
        assert make_entity(EntityKind.FUNCTION, "foo", "a.ml").display_name == "foo"
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml", full_name="A.foo")
        assert e.display_name == "A.foo"

    def test_renamed_is_a_copy(self):
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml", example_uses=[1])
        copy = e.renamed("A.foo")
        copy.add_example_use(2)
        assert copy.name == "A.foo"
        assert e.name == "foo"
        assert e.example_uses == [1]

    def test_remapped_applies_function(self):
        e = make_entity(EntityKind.FUNCTION, "foo", "a.ml", example_uses=[0, 2])
        shifted = e.remapped(lambda i: i + 10)
        assert shifted.example_uses == [10, 12]
        assert e.example_uses == [0, 2]
        assert shifted.kind is e.kind

    def test_defaults(self):
        e = Entity(kind=EntityKind.GLOBAL, name="x")
        assert e.position == Position(1, 0)
        assert e.full_name == ""
        assert e.external_users == 0
        assert e.example_uses == []


class TestEntityIds:
    """Test checked index access."""

    def test_check_entity_id_in_range(self):
        assert check_entity_id(0, 1) == 0
        assert check_entity_id(4, 5) == 4

    @pytest.mark.parametrize("entity_id", [-1, 5, 100, True, "1"])
    def test_check_entity_id_out_of_range(self, entity_id):
        with pytest.raises(InvalidEntityReference):
            check_entity_id(entity_id, 5)

    def test_database_entity_lookup(self, sample_db):
        assert sample_db.entity(1).name == "Parser"
        with pytest.raises(InvalidEntityReference):
            sample_db.entity(len(sample_db))

    def test_examples_of(self, sample_db):
        examples = sample_db.examples_of(sample_db.entity(0))
        assert [e.name for e in examples] == ["test_parse_file"]

    def test_check_references_accepts_valid_db(self, sample_db):
        sample_db.check_references()

    def test_check_references_names_offender(self, sample_db):
        sample_db.entity(1).add_example_use(4)
        with pytest.raises(InvalidEntityReference) as exc_info:
            sample_db.check_references()
        assert exc_info.value.owner == 1
        assert exc_info.value.entity_id == 4


class TestDatabase:
    def test_empty_database(self):
        db = empty_database()
        assert db == Database(root="", dirs=[], files=[], entities=[])
        assert len(db) == 0

    def test_ids_and_iteration(self, sample_db):
        assert list(sample_db.ids()) == [0, 1, 2, 3]
        assert [e.name for e in sample_db][:2] == ["parse_file", "Parser"]

    def test_stripped(self, sample_db):
        assert sample_db.stripped("/home/dev/project/lib/a.ml") == "lib/a.ml"
        assert sample_db.stripped("lib/a.ml") == "lib/a.ml"
