"""Shared test fixtures for mmhelp test suite."""

import io
import json
import os
from unittest.mock import patch

import pytest

from mmhelp.lib.log_lib import channels as _channels_mod
from mmhelp.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: runs the CLI in a subprocess (deselect with -m 'not slow')"
    )


# ---------------------------------------------------------------------------
# Output manager isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output():
    """Give every test a fresh OutputManager singleton and channel table.

    main() installs the mmhelp channel set and a manager bound to the
    stderr of the moment; neither may leak into the next test.
    """
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    _manager_mod._manager = None
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.mmhelp/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, monkeypatch):
    """A project directory that is also the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


# ---------------------------------------------------------------------------
# Node stream fixtures
# ---------------------------------------------------------------------------
def to_stream(*objs):
    """Encode dicts as a JSON Lines text stream."""
    return io.StringIO("".join(json.dumps(o) + "\n" for o in objs))


def comment(target, value):
    return {"kind": "comment", "target": target, "value": value}


BUILD_AND_CLEAN = [
    {"kind": "target", "name": "clean"},
    comment("clean", "Removes artifacts."),
    {"kind": "include", "path": "common.mk", "optional": False},
    comment("build", "Builds the project.\nSee docs."),
    comment("", "File header, not attached to any target."),
    {"kind": "target", "name": "build"},
]


@pytest.fixture
def build_and_clean():
    """Node stream holding a 'build' and a 'clean' comment plus noise."""
    return to_stream(*BUILD_AND_CLEAN)


@pytest.fixture
def node_file(tmp_project):
    """Write BUILD_AND_CLEAN to nodes.jsonl in the project directory."""
    path = tmp_project / "nodes.jsonl"
    path.write_text(to_stream(*BUILD_AND_CLEAN).getvalue(), encoding="utf-8")
    return path


@pytest.fixture
def make_stream():
    """Factory: make_stream(*dicts) -> JSON Lines text stream."""
    return to_stream


@pytest.fixture
def static_parser():
    """Factory for parsers that ignore their input and return fixed nodes.

    The returned parser records each (source, include_path) call on
    ``parser.calls``.
    """
    def _make(nodes):
        def parser(source, include_path):
            parser.calls.append((source, include_path))
            return list(nodes)
        parser.calls = []
        return parser
    return _make
