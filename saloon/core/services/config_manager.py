"""
config_manager.py
-----------------
Configuration loader for gameplay tuning files.

Features:
- Loads .json files from the package config directory (or an absolute path)
- Builds file index once at startup for O(1) lookups
- Recursively merges over in-code defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from saloon.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    CONFIG_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename (resolved through the index) or full path
        default_dict: Default fallback config
        strict: If True, raise exception on missing or invalid file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) and os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        return _merge_dicts(default_dict, data)

    except (ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan config directories and cache all file paths. Call once at startup."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def get_indexed_files():
    """Return copy of file index for debugging."""
    if _FILE_INDEX is None:
        build_file_index()
    return _FILE_INDEX.copy()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """O(1) lookup from pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    key = filename + ".json"
    if key in _FILE_INDEX:
        return _FILE_INDEX[key]

    # Missing files fall through to the loader, which reports them
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys. Never mutates inputs."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
