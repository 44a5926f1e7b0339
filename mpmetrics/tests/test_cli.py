"""Tests for the mpmetrics command line."""

import json

import pytest

from mpmetrics.cli import main


class TestBuildCommand:
    def test_build_prints_metadata(self, capsys):
        exit_code = main(
            [
                "build",
                "--name",
                "heap_used",
                "--type",
                "gauge",
                "--unit",
                "bytes",
                "--tags",
                "pool=eden, gc=g1",
                "--tag",
                "gc=zgc",
                "--reusable",
            ]
        )

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            "name": "heap_used",
            "display_name": "heap_used",
            "description": None,
            "type": "gauge",
            "unit": "bytes",
            "reusable": True,
            "tags": {"pool": "eden", "gc": "zgc"},
        }

    def test_build_defaults(self, capsys):
        assert main(["build", "--name", "x"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["type"] == "invalid"
        assert output["unit"] == "none"
        assert output["tags"] == {}

    def test_build_applies_global_tags(self, capsys, monkeypatch):
        monkeypatch.setenv("MP_METRICS_TAGS", "env=prod")

        assert main(["build", "--name", "x"]) == 0

        assert json.loads(capsys.readouterr().out)["tags"] == {"env": "prod"}

    def test_build_requires_name(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["build"])
        assert exc_info.value.code == 2

    def test_build_rejects_unknown_type(self):
        with pytest.raises(SystemExit):
            main(["build", "--name", "x", "--type", "sparkline"])


class TestGaugesCommand:
    def test_lists_inherited_gauges(self, capsys):
        exit_code = main(["gauges", "mpmetrics.tck:InheritedChildGaugeMethodBean"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert [g["method"] for g in output] == ["get_child_gauge", "get_gauge"]
        assert output[1]["owner"] == "InheritedParentGaugeMethodBean"
        assert output[1]["type"] == "gauge"

    def test_bad_target(self, capsys):
        assert main(["gauges", "mpmetrics.tck"]) == 1
        assert "MODULE:CLASS" in capsys.readouterr().err

    def test_missing_class(self, capsys):
        assert main(["gauges", "mpmetrics.tck:NoSuchBean"]) == 1
        assert "Cannot load" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
