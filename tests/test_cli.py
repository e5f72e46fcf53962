"""Tests for the vendingmachine command line."""

import pytest
from click.testing import CliRunner

from vendingmachine.cli.commands import cli
from vendingmachine.db.store import MachineStore


@pytest.fixture
def runner():
    return CliRunner()


class TestInitDb:
    def test_creates_file(self, runner, tmp_path):
        path = tmp_path / "machine-db.db"

        result = runner.invoke(cli, ["--db", str(path), "init-db"])

        assert result.exit_code == 0, result.output
        assert "Database initialized" in result.output
        assert path.is_file()

    def test_existing_file_reported(self, runner, db_path):
        result = runner.invoke(cli, ["--db", str(db_path), "init-db"])

        assert result.exit_code == 0
        assert "already exists" in result.output

    def test_init_with_seed(self, runner, tmp_path):
        path = tmp_path / "machine-db.db"

        result = runner.invoke(cli, ["--db", str(path), "init-db", "--seed"])

        assert result.exit_code == 0, result.output
        with MachineStore(path) as store:
            assert store.table_counts() == {"change": 8, "items": 3}

    def test_default_path_from_working_directory(self, runner, tmp_path):
        result = runner.invoke(cli, ["init-db"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "machine-db.db").is_file()


class TestSeed:
    def test_seed(self, runner, db_path):
        result = runner.invoke(cli, ["--db", str(db_path), "seed"])

        assert result.exit_code == 0, result.output
        assert "Seeded 8 denominations and 3 items" in result.output

    def test_log_lines_go_to_stderr(self, runner, db_path):
        result = runner.invoke(cli, ["--db", str(db_path), "seed"])

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "Seeded 8 denominations and 3 items"
        assert "store.seeded" in result.stderr

    def test_duplicate_seed_logs_stay_off_stdout(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "seed"])

        assert "repository.duplicate_key" not in result.stdout
        assert "store.seed_failed" not in result.stdout
        assert "store.seed_failed" in result.stderr

    def test_second_seed_fails(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "seed"])

        assert result.exit_code == 1
        assert "Already seeded" in result.output

    def test_second_seed_with_skip_existing(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "seed", "--skip-existing"])

        assert result.exit_code == 0, result.output
        assert "Seeded 0 denominations and 0 items" in result.output

    def test_skip_existing_from_environment(self, runner, db_path):
        env = {"VENDING_SKIP_EXISTING_SEED_ROWS": "true"}
        runner.invoke(cli, ["--db", str(db_path), "seed"], env=env)

        result = runner.invoke(cli, ["--db", str(db_path), "seed"], env=env)

        assert result.exit_code == 0, result.output

    def test_missing_database(self, runner, tmp_path):
        result = runner.invoke(cli, ["--db", str(tmp_path / "missing.db"), "seed"])

        assert result.exit_code == 1
        assert "Database not found" in result.output


class TestListing:
    def test_status(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "status"])

        assert result.exit_code == 0, result.output
        assert "change" in result.output
        assert "items" in result.output

    def test_change(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "change"])

        assert result.exit_code == 0, result.output
        assert "50p" in result.output
        assert "£2" in result.output
        assert "800" in result.stdout

    def test_change_before_seeding(self, runner, db_path):
        result = runner.invoke(cli, ["--db", str(db_path), "change"])

        assert result.exit_code == 0, result.output
        assert "No change loaded" in result.output

    def test_items_in_stock(self, runner, db_path):
        runner.invoke(cli, ["--db", str(db_path), "seed"])

        result = runner.invoke(cli, ["--db", str(db_path), "items", "--in-stock"])

        assert result.exit_code == 0, result.output
        assert "Sainsburys Lager" in result.output
        assert "Canned Tomatoes" not in result.output

    def test_status_missing_database(self, runner, tmp_path):
        result = runner.invoke(cli, ["--db", str(tmp_path / "missing.db"), "status"])

        assert result.exit_code == 1


def test_invalid_configuration_exits(runner, db_path):
    result = runner.invoke(cli, ["--db", str(db_path), "status"], env={"VENDING_LOG_LEVEL": "chatty"})

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
