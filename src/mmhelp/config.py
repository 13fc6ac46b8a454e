"""Configuration management for mmhelp.

Three-layer config resolution (highest priority wins):
  1. CLI flags - explicit on the command line
  2. Project config - .mmhelp.json in the working directory or a parent
  3. Global config - ~/.mmhelp/config.json (or --config PATH)

A project that plugs in its own parser records it once::

    {"parser": "mmake.parser:parse_recursive", "include_dir": "/opt/mk"}

and every later ``mmhelp`` invocation picks it up.
"""

import json
import os
from pathlib import Path

from mmhelp.lib.log_lib import get_output

PROJECT_CONFIG_NAME = ".mmhelp.json"
CONFIG_KEYS = ["file", "include_dir", "parser"]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.mmhelp/)."""
    return Path.home() / ".mmhelp"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .mmhelp.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    while True:
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning {} if missing or malformed."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        get_output().warning(f"  [WARN] Ignoring malformed config {path}: {e.msg}")
        return {}
    if not isinstance(data, dict):
        get_output().warning(f"  [WARN] Ignoring config {path}: not a JSON object")
        return {}
    return data


def load_global_config(path=None):
    """Load the global config file, or ``path`` when given."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .mmhelp.json walking upward from start_dir.

    Returns (config_dict, path_or_None).
    """
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    For each key, checks the argparse namespace, then the project
    .mmhelp.json, then the global config. JSON files may spell keys
    with dashes or underscores.

    Returns a dict keyed by the underscore spelling; unresolved keys
    map to None.
    """
    if keys is None:
        keys = CONFIG_KEYS

    out = get_output()
    project_cfg, project_path = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))
    if project_path:
        out.emit(2, "  [config] project config: {path}", channel='config',
                 path=project_path)

    resolved = {}
    for key in keys:
        arg_key = key.replace("-", "_")
        dash_key = arg_key.replace("_", "-")

        value = getattr(args, arg_key, None)
        source = "cli"
        if value is None:
            value = project_cfg.get(arg_key, project_cfg.get(dash_key))
            source = "project"
        if value is None:
            value = global_cfg.get(arg_key, global_cfg.get(dash_key))
            source = "global"

        resolved[arg_key] = value
        if value is not None:
            out.emit(2, "  [config] {key} = {value!r} ({source})", channel='config',
                     key=arg_key, value=value, source=source)

    return resolved
