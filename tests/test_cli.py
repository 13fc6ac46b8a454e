"""Tests for mmhelp.cli - CLI argument parsing and dispatch."""

import json
import subprocess
import sys

import pytest

from mmhelp.cli import _build_common_parser, _extract_global_flags, main


SHORT_VIEW = (
    "\n"
    "  build   Builds the project.\n"
    "  clean   Removes artifacts.\n"
    "\n"
)

PLUGIN_SOURCE = '''
from mmhelp.nodes import Comment

SEEN = []


def parse(source, include_path):
    SEEN.append(include_path)
    for line in source:
        name, _, text = line.rstrip("\\n").partition("=")
        yield Comment(name, text.replace("|", "\\n"))
'''


class TestGlobalFlagExtraction:
    """Test the Docker-style two-pass global flag parsing."""

    def test_verbose_before_subcommand(self):
        global_args, remaining = _extract_global_flags(["-vv", "list", "-f", "x"])
        assert global_args.verbose == 2
        assert remaining == ["list", "-f", "x"]

    def test_verbose_after_subcommand(self):
        global_args, remaining = _extract_global_flags(["describe", "build", "--verbose"])
        assert global_args.verbose == 1
        assert remaining == ["describe", "build"]

    def test_quiet_counts(self):
        global_args, _ = _extract_global_flags(["-QQ", "list"])
        assert global_args.quiet == 2

    def test_show_collects_specs(self):
        global_args, _ = _extract_global_flags(["--show", "parse:2", "list", "--show", "render"])
        assert global_args.show == ["parse:2", "render"]

    def test_config_with_value(self):
        global_args, remaining = _extract_global_flags(["--config", "/tmp/c.json", "list"])
        assert global_args.config == "/tmp/c.json"
        assert "/tmp/c.json" not in remaining

    def test_no_global_flags(self):
        global_args, remaining = _extract_global_flags(["list", "-f", "n.jsonl"])
        assert global_args.verbose == 0
        assert global_args.quiet == 0
        assert global_args.show is None
        assert global_args.config is None
        assert remaining == ["list", "-f", "n.jsonl"]


class TestCommonParser:
    """Test the shared parent parser for source-selection flags."""

    def test_short_flags(self):
        args = _build_common_parser().parse_args(["-f", "n.jsonl", "-I", "/opt/mk"])
        assert args.file == "n.jsonl"
        assert args.include_dir == "/opt/mk"

    def test_parser_flag(self):
        args = _build_common_parser().parse_args(["--parser", "pkg.mod:parse"])
        assert args.parser == "pkg.mod:parse"

    def test_file_help_names_node_stream(self):
        text = _build_common_parser().format_help()
        assert "Node stream to read" in text
        assert "build file" not in text

    def test_defaults_are_none(self):
        """Unset flags must be None so config files can fill them in."""
        args = _build_common_parser().parse_args([])
        assert args.file is None
        assert args.include_dir is None
        assert args.parser is None


class TestMainEntryPoint:
    """Test the main() function with various argv inputs."""

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "mmhelp" in capsys.readouterr().out

    def test_help_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "list" in out
        assert "describe" in out

    def test_no_args_shows_help(self, capsys):
        assert main([]) == 0
        assert "describe" in capsys.readouterr().out

    def test_bare_show_lists_channels(self, capsys):
        assert main(["--show"]) == 0
        out = capsys.readouterr().out
        assert "Available channels:" in out
        assert "render" in out

    def test_bad_show_spec(self, capsys):
        assert main(["--show", "parse:loud", "list"]) == 2
        assert "invalid level" in capsys.readouterr().err


class TestListCommand:
    """mmhelp list - short view."""

    def test_from_file(self, node_file, tmp_config_home, capsys):
        assert main(["list", "-f", str(node_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == SHORT_VIEW
        assert captured.err == ""

    def test_from_stdin(self, tmp_project, tmp_config_home, make_stream, monkeypatch, capsys):
        stream = make_stream({"kind": "comment", "target": "t", "value": "Tests."})
        monkeypatch.setattr(sys, "stdin", stream)
        assert main(["list"]) == 0
        assert capsys.readouterr().out == "\n  t   Tests.\n\n"

    def test_verbose_shows_tip_and_summary(self, node_file, tmp_config_home, capsys):
        assert main(["-v", "list", "-f", str(node_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == SHORT_VIEW
        assert "[render] short view: 2 targets" in captured.err
        assert "mmhelp describe <target>" in captured.err

    def test_file_from_project_config(self, node_file, tmp_project, tmp_config_home, capsys):
        (tmp_project / ".mmhelp.json").write_text(json.dumps({"file": "nodes.jsonl"}))
        assert main(["list"]) == 0
        assert capsys.readouterr().out == SHORT_VIEW

    def test_parse_failure(self, tmp_project, tmp_config_home, capsys):
        bad = tmp_project / "bad.jsonl"
        bad.write_text('{"kind": "comment", "target": "a", "value": "x"}\nnot json\n')
        assert main(["list", "-f", str(bad)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR: parsing: line 2: invalid JSON" in captured.err
        assert "JSON Lines node stream" in captured.err

    def test_deeply_nested_input(self, tmp_project, tmp_config_home, capsys):
        deep = tmp_project / "deep.jsonl"
        deep.write_text("[" * 200000 + "\n")
        assert main(["list", "-f", str(deep)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR: parsing: line 1: invalid JSON: nested too deeply" in captured.err

    def test_plugin_runtime_error(self, tmp_project, tmp_config_home, monkeypatch, capsys):
        (tmp_project / "mmhelp_failing_plugin.py").write_text(
            "def parse(source, include_path):\n"
            "    raise RuntimeError('include cycle detected')\n"
        )
        monkeypatch.syspath_prepend(str(tmp_project))
        monkeypatch.delitem(sys.modules, "mmhelp_failing_plugin", raising=False)
        (tmp_project / "Makefile").write_text("all:\n")
        rc = main(["list", "-f", "Makefile", "--parser", "mmhelp_failing_plugin:parse"])
        assert rc == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR: parsing: include cycle detected" in captured.err
        assert "JSON Lines node stream" not in captured.err

    def test_missing_file(self, tmp_project, tmp_config_home, capsys):
        assert main(["list", "-f", "nope.jsonl"]) == 1
        assert "cannot read nope.jsonl" in capsys.readouterr().err

    def test_bad_parser_spec(self, node_file, tmp_config_home, capsys):
        assert main(["list", "-f", str(node_file), "--parser", "no_such_mod:parse"]) == 1
        assert "cannot import parser module" in capsys.readouterr().err

    def test_empty_stream_hint(self, tmp_project, tmp_config_home, make_stream, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", make_stream({"kind": "target", "name": "build"}))
        assert main(["list"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "\n\n"
        assert "No target comments found" in captured.err

    def test_hard_wall_silences_errors(self, tmp_project, tmp_config_home, capsys):
        assert main(["-QQQQ", "list", "-f", "nope.jsonl"]) == 1
        assert capsys.readouterr().err == ""


class TestDescribeCommand:
    """mmhelp describe - long views."""

    def test_all_targets(self, node_file, tmp_config_home, capsys):
        assert main(["describe", "-f", str(node_file)]) == 0
        assert capsys.readouterr().out == (
            "\n"
            "  build:\n"
            "    Builds the project.\n"
            "    See docs.\n"
            "\n"
            "  clean:\n"
            "    Removes artifacts.\n"
            "\n"
            "\n"
        )

    def test_one_target(self, node_file, tmp_config_home, capsys):
        assert main(["describe", "build", "-f", str(node_file)]) == 0
        assert capsys.readouterr().out == "\n  Builds the project.\n  See docs.\n\n"

    def test_missing_target(self, node_file, tmp_config_home, capsys):
        assert main(["describe", "missing", "-f", str(node_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "\n\n"
        assert "No help found for target 'missing'" in captured.err

    def test_missing_target_quiet(self, node_file, tmp_config_home, capsys):
        assert main(["-Q", "describe", "missing", "-f", str(node_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "\n\n"
        assert captured.err == ""


class TestParserPlugin:
    """--parser loads a third-party parser callable."""

    @pytest.fixture
    def plugin(self, tmp_project, monkeypatch):
        (tmp_project / "mmhelp_test_plugin.py").write_text(PLUGIN_SOURCE)
        monkeypatch.syspath_prepend(str(tmp_project))
        monkeypatch.delitem(sys.modules, "mmhelp_test_plugin", raising=False)
        source = tmp_project / "targets.txt"
        source.write_text("zap=Zaps.|Really.\n=no target\napp=Builds the app.\n")
        return source

    def test_plugin_renders(self, plugin, tmp_config_home, capsys):
        rc = main(["list", "-f", str(plugin), "--parser", "mmhelp_test_plugin:parse"])
        assert rc == 0
        assert capsys.readouterr().out == "\n  app   Builds the app.\n  zap   Zaps.\n\n"

    def test_include_dir_reaches_plugin(self, plugin, tmp_config_home, capsys):
        rc = main(["describe", "zap", "-f", str(plugin), "-I", "/opt/mk",
                   "--parser", "mmhelp_test_plugin:parse"])
        assert rc == 0
        assert capsys.readouterr().out == "\n  Zaps.\n  Really.\n\n"
        import mmhelp_test_plugin
        assert mmhelp_test_plugin.SEEN == ["/opt/mk"]

    def test_default_include_dir(self, plugin, tmp_config_home, capsys):
        main(["list", "-f", str(plugin), "--parser", "mmhelp_test_plugin:parse"])
        import mmhelp_test_plugin
        assert mmhelp_test_plugin.SEEN == ["/usr/local/include"]


@pytest.mark.slow
class TestSubprocess:
    """Run the installed module end to end."""

    def test_module_entry_point(self, node_file):
        result = subprocess.run(
            [sys.executable, "-m", "mmhelp", "list", "-f", str(node_file)],
            capture_output=True, text=True, timeout=60,
        )
        assert result.returncode == 0
        assert result.stdout == SHORT_VIEW

    def test_reads_stdin(self, node_file):
        result = subprocess.run(
            [sys.executable, "-m", "mmhelp", "describe", "clean"],
            input=node_file.read_text(encoding="utf-8"),
            capture_output=True, text=True, timeout=60,
        )
        assert result.returncode == 0
        assert result.stdout == "\n  Removes artifacts.\n\n"
