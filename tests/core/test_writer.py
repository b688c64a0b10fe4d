#!/usr/bin/env pkgx uv run

import pytest
import yaml

from core.writer import Document, Writer, load, to_yaml
from generators.software.structs import Software


class TestToYaml:
    def test_field_order_is_preserved(self):
        software = Software(
            "00000000-0000-0000-0000-000000000001",
            "-",
            "2014-05-01T00:00:00+00:00",
            "2014-05-01T00:00:00+00:00",
        )

        text = to_yaml([software])

        assert text.startswith("---\n")
        lines = text.splitlines()
        assert lines[1].startswith("- id: ")
        assert [line.split(":")[0].strip() for line in lines[2:]] == [
            "publiccode_yml",
            "created_at",
            "updated_at",
        ]

    def test_values_round_trip_as_strings(self):
        """timestamps and the '-' placeholder must come back as str, not
        datetime or None"""
        row = {
            "id": "abc",
            "publiccode_yml": "-",
            "created_at": "2014-05-01T00:00:00+00:00",
            "updated_at": "2014-05-01T00:00:00+00:00",
        }
        assert yaml.safe_load(to_yaml([row])) == [row]

    def test_empty(self):
        assert yaml.safe_load(to_yaml([])) == []


class TestWriter:
    def test_write_creates_output_dir(self, tmp_path):
        output = tmp_path / "nested" / "fixtures"
        writer = Writer(str(output))

        paths = writer.write(
            [Document("software.yml", "--- []\n"), Document("b.yml", "---\n- 1\n")]
        )

        assert paths == [str(output / "software.yml"), str(output / "b.yml")]
        assert (output / "software.yml").read_text() == "--- []\n"
        assert (output / "b.yml").read_text() == "---\n- 1\n"

    def test_write_overwrites(self, tmp_path):
        (tmp_path / "software.yml").write_text("old")
        Writer(str(tmp_path)).write([Document("software.yml", "new")])
        assert (tmp_path / "software.yml").read_text() == "new"


class TestLoad:
    def test_load(self, tmp_path):
        (tmp_path / "software.yml").write_text("---\n- id: a\n- id: b\n")
        assert load(str(tmp_path), "software.yml") == [{"id": "a"}, {"id": "b"}]

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load(str(tmp_path), "software.yml")

    def test_load_not_a_list(self, tmp_path):
        (tmp_path / "software.yml").write_text("id: a\n")
        with pytest.raises(ValueError):
            load(str(tmp_path), "software.yml")
