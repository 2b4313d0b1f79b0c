"""Tests for the semdb command line (cli/)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from semdb.cli import app
from semdb.model import Database, EntityKind, make_entity
from semdb.store import load_database, save_database

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in ("SEMDB_DB_NAME", "SEMDB_TOP_K", "SEMDB_ALLOW_ROOT_MISMATCH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def db_file(tmp_path, sample_db):
    path = tmp_path / "PFFF_DB.db"
    save_database(sample_db, path)
    return path


@pytest.fixture
def other_root_file(tmp_path):
    db = Database(
        root="/elsewhere",
        dirs=[("lib", 2)],
        files=[("lib/other.ml", 2)],
        entities=[make_entity(EntityKind.FUNCTION, "other", "lib/other.ml", example_uses=[0])],
    )
    path = tmp_path / "other.db"
    save_database(db, path)
    return path


class TestInfo:
    def test_summary(self, db_file):
        result = runner.invoke(app, ["info", str(db_file)])
        assert result.exit_code == 0, result.output
        assert "Entities: 4" in result.output
        assert "Function" in result.output

    def test_default_db_name(self, db_file):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0, result.output
        assert "Files: 2" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.db")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_wrongly_typed_config(self, tmp_path, db_file):
        config = tmp_path / "semdb.toml"
        config.write_text('top_k = "5"\n')
        result = runner.invoke(app, ["--config", str(config), "info", str(db_file)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, TypeError)

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "semdb" in result.output


class TestQueries:
    def test_top(self, db_file):
        result = runner.invoke(app, ["top", str(db_file), "--k", "1"])
        assert result.exit_code == 0, result.output
        assert "Parse.parse_file" in result.output
        assert "Parser.run" not in result.output

    def test_top_single_file(self, db_file):
        result = runner.invoke(app, ["top", str(db_file), "--file", "tests/test_parse.ml"])
        assert result.exit_code == 0, result.output
        assert "test_parse_file" in result.output
        assert "lib/parse.ml" not in result.output

    def test_complete(self, db_file):
        result = runner.invoke(app, ["complete", "parse", "--db", str(db_file)])
        assert result.exit_code == 0, result.output
        assert "parse.ml" in result.output
        assert "Parser" in result.output


class TestMaintenance:
    def test_merge_same_root(self, tmp_path, db_file):
        out = tmp_path / "merged.db"
        result = runner.invoke(app, ["merge", str(db_file), str(db_file), "-o", str(out)])
        assert result.exit_code == 0, result.output
        merged = load_database(out)
        assert len(merged.entities) == 8
        assert merged.entities[4].example_uses == [7]

    def test_merge_root_mismatch_declined(self, tmp_path, db_file, other_root_file):
        out = tmp_path / "merged.db"
        result = runner.invoke(
            app, ["merge", str(db_file), str(other_root_file), "-o", str(out)], input="n\n"
        )
        assert result.exit_code == 1
        assert not out.exists()

    def test_merge_root_mismatch_confirmed(self, tmp_path, db_file, other_root_file):
        out = tmp_path / "merged.db"
        result = runner.invoke(
            app, ["merge", str(db_file), str(other_root_file), "-o", str(out)], input="y\n"
        )
        assert result.exit_code == 0, result.output
        assert load_database(out).entities[4].example_uses == [4]

    def test_merge_root_mismatch_forced(self, tmp_path, db_file, other_root_file):
        out = tmp_path / "merged.db"
        result = runner.invoke(
            app, ["merge", str(db_file), str(other_root_file), "-o", str(out), "--force"]
        )
        assert result.exit_code == 0, result.output
        assert load_database(out).root == "/home/dev/project"

    def test_merge_needs_two_inputs(self, tmp_path, db_file):
        result = runner.invoke(app, ["merge", str(db_file), "-o", str(tmp_path / "m.db")])
        assert result.exit_code == 1

    def test_adjust(self, tmp_path):
        db = Database(
            entities=[
                make_entity(EntityKind.METHOD, "run", "a.ml", external_users=9),
                make_entity(EntityKind.METHOD, "run", "b.ml", external_users=3),
            ]
        )
        src = tmp_path / "db.json"
        out = tmp_path / "adjusted.json"
        save_database(db, src)
        result = runner.invoke(app, ["adjust", str(src), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert [e.external_users for e in load_database(out).entities] == [4, 1]
        assert [e.external_users for e in load_database(src).entities] == [9, 3]

    def test_convert_readable(self, tmp_path, db_file, sample_db):
        out = tmp_path / "pretty.json"
        result = runner.invoke(app, ["convert", str(db_file), "-o", str(out), "--readable"])
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").startswith("{\n")
        assert load_database(out) == sample_db
