"""
Tests for the registration run controller.
"""

import io
import logging

import pytest

from score_toolkit.core.models import Entry
from score_toolkit.registry.config import DEFAULT_ENTRIES, RegistryConfig
from score_toolkit.registry.controller import (
    RegistrationError,
    load_entries,
    run_registration,
)
from score_toolkit.registry.renderer import render
from score_toolkit.registry.processor import ingest


class TestLoadEntries:
    """Tests for load_entries()."""

    def test_load_when_no_input_then_returns_defaults(self):
        assert load_entries(RegistryConfig()) == list(DEFAULT_ENTRIES)

    def test_load_when_json_file_then_reads_entries(self, write_json):
        path = write_json({"schema_version": 1, "entries": [{"name": "X", "score": 1}]})

        assert load_entries(RegistryConfig(input_path=path)) == [Entry("X", 1)]

    def test_load_when_jsonl_file_then_reads_entries(self, write_jsonl):
        path = write_jsonl(['{"name": "X", "score": 1}', '{"name": "X", "score": 2}'])

        assert load_entries(RegistryConfig(input_path=path)) == [Entry("X", 1), Entry("X", 2)]

    def test_load_when_format_forced_then_ignores_suffix(self, write_jsonl):
        path = write_jsonl(['{"name": "X", "score": 1}'], name="entries.txt")

        config = RegistryConfig(input_path=path, input_format="jsonl")

        assert load_entries(config) == [Entry("X", 1)]

    def test_load_when_missing_file_then_raises_registration_error(self, tmp_path):
        config = RegistryConfig(input_path=tmp_path / "missing.json")

        with pytest.raises(RegistrationError, match="not found"):
            load_entries(config)

    def test_load_when_invalid_entry_then_error_names_location(self, write_json):
        path = write_json({"schema_version": 1, "entries": [{"name": "X", "score": "high"}]})

        with pytest.raises(RegistrationError, match=r"at entries\[0\]\.score"):
            load_entries(RegistryConfig(input_path=path))

    def test_load_when_directory_given_then_raises_registration_error(self, tmp_path):
        folder = tmp_path / "entries.json"
        folder.mkdir()

        with pytest.raises(RegistrationError, match="Cannot read entries"):
            load_entries(RegistryConfig(input_path=folder))

    @pytest.mark.parametrize("name", ["latin1.json", "latin1.jsonl"])
    def test_load_when_not_utf8_then_raises_registration_error(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b'{"name": "\xff\xfe", "score": 1}\n')

        with pytest.raises(RegistrationError, match="not valid UTF-8"):
            load_entries(RegistryConfig(input_path=path))

    def test_load_when_strict_then_schema_enforced(self, write_json):
        path = write_json({"schema_version": 1, "entries": [], "comment": "x"})

        assert load_entries(RegistryConfig(input_path=path)) == []
        with pytest.raises(RegistrationError, match="Schema validation failed"):
            load_entries(RegistryConfig(input_path=path, strict=True))


class TestRunRegistration:
    """Tests for run_registration()."""

    def test_run_when_defaults_then_writes_builtin_report(self):
        stream = io.StringIO()

        result = run_registration(stream=stream)

        assert stream.getvalue() == result.report
        assert result.report == render(ingest(DEFAULT_ENTRIES))
        assert result.source == "built-in"
        assert result.views.latest_scores["Alice"] == 97

    def test_run_when_no_stream_then_writes_stdout(self, capsys):
        run_registration()

        out = capsys.readouterr().out
        assert out.startswith("All participants (in order of registration):\nAlice Bob Alice")

    def test_run_when_entries_injected_then_config_input_ignored(self, tmp_path):
        config = RegistryConfig(input_path=tmp_path / "never-read.json")

        result = run_registration(config, entries=[Entry("X", 1)], stream=io.StringIO())

        assert result.source == "injected"
        assert result.views.history == ("X",)

    def test_run_when_empty_injected_then_headers_only(self):
        result = run_registration(entries=[], stream=io.StringIO())

        assert result.views.is_empty
        assert "Final scores:\n" in result.report

    def test_run_when_file_input_then_source_is_path(self, write_jsonl):
        path = write_jsonl(['{"name": "X", "score": 1}'])

        result = run_registration(RegistryConfig(input_path=path), stream=io.StringIO())

        assert result.source == str(path)

    def test_run_when_invalid_file_then_nothing_written(self, write_json):
        path = write_json({"schema_version": 2, "entries": []})
        stream = io.StringIO()

        with pytest.raises(RegistrationError):
            run_registration(RegistryConfig(input_path=path), stream=stream)

        assert stream.getvalue() == ""

    def test_run_when_info_logging_then_reports_counts(self, caplog):
        with caplog.at_level(logging.INFO, logger="score_toolkit.registry.controller"):
            run_registration(stream=io.StringIO())

        assert "Ingesting 5 entries from built-in" in caplog.text
        assert "5 registrations, 4 unique participants" in caplog.text
