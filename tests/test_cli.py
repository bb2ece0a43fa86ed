# ==============================================
# Tests for the command line entry point
# ==============================================

import pytest
from pymongo.errors import InvalidURI, ServerSelectionTimeoutError

from infra_cost import cli
from infra_cost import config as config_module
from infra_cost.config import MongoConfig
from infra_cost.storage.sample_data import insert_sample_data


@pytest.fixture(autouse=True)
def default_config(app_config, monkeypatch):
    monkeypatch.setattr(cli, "get_config", lambda: app_config)


def test_main_success(patched_driver, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "=== Cost Analysis Report ===" in out
    assert "- SRV004 (API Gateway)" in out


def test_main_top(patched_driver, capsys):
    assert cli.main(["--top", "1"]) == 0
    entries = [line for line in capsys.readouterr().out.splitlines() if line.startswith("- ")]
    assert len(entries) == 1


def test_main_negative_top(capsys):
    assert cli.main(["--top", "-2"]) == 1
    assert "❌ Error: Report limit must be >= 0, got -2" in capsys.readouterr().out


def test_main_connection_failure(patched_driver, capsys):
    patched_driver.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")
    assert cli.main([]) == 1
    out = capsys.readouterr().out
    assert "❌ Error: Could not connect to MongoDB" in out
    assert "Cost Analysis Report" not in out


def test_main_invalid_uri(app_config, patched_driver, capsys):
    app_config.mongo = MongoConfig(user="ops", password="p@ss")
    patched_driver.side_effect = InvalidURI("Username and password must be escaped")
    assert cli.main([]) == 1
    assert "❌ Error: Invalid MongoDB connection settings" in capsys.readouterr().out


def test_main_malformed_record(patched_driver, monkeypatch, capsys):
    def store_bad_document(collection):
        collection.insert_one({"resourceId": "BAD", "resourceType": "Server", "costPerHour": "ten"})

    monkeypatch.setattr("infra_cost.optimizer.insert_sample_data", store_bad_document)
    assert cli.main([]) == 1
    out = capsys.readouterr().out
    assert "❌ Error: Malformed record: 'costPerHour' must be a number" in out
    assert "Cost Analysis Report" not in out
    patched_driver.return_value.close.assert_called_once()


def test_main_duplicate_resource(patched_driver, monkeypatch, capsys):
    def insert_twice(collection):
        insert_sample_data(collection)
        insert_sample_data(collection)

    monkeypatch.setattr("infra_cost.optimizer.insert_sample_data", insert_twice)
    assert cli.main([]) == 1
    out = capsys.readouterr().out
    assert "❌ Error: Resource 'SRV001' already exists in the collection." in out
    patched_driver.return_value.close.assert_called_once()


@pytest.mark.parametrize("name, value", [
    ("REPORT_LIMIT", "three"),
    ("REPORT_LIMIT", "-1"),
    ("MONGO_PORT", "mongo"),
])
def test_main_invalid_environment(name, value, monkeypatch, capsys):
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    monkeypatch.setattr(cli, "get_config", config_module.get_config)
    monkeypatch.setenv(name, value)
    assert cli.main([]) == 1
    assert f"❌ Error: {name} must be" in capsys.readouterr().out
