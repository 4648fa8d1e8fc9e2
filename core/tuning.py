"""core/tuning.py — Data-driven tuning constants.

Gameplay numbers a designer might want to tweak (clock speed, schedule
window, danger rates, reach) live in ``data/tuning.toml``.  Systems read
them with the matching ``core.constants`` value as the default::

    from core.tuning import get as _tun
    rise = _tun("danger", "rise_rate", DANGER_RISE_RATE)

An absent file or key leaves the default in force, so tests that never
call ``load()`` run against ``core.constants``.

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F5.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib


_data: dict = {}
_path: Path | None = None

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning values from *path* (default ``data/tuning.toml``)."""
    global _data, _path

    path = DEFAULT_PATH if path is None else Path(path)
    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path)


def reset() -> None:
    """Forget every loaded value; all reads return their defaults."""
    global _data
    _data = {}


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables.  A TOML integer
    read against a float default comes back as a float, so ``rise_rate = 14``
    still reads as ``14.0``.

    >>> get("danger", "rise_rate", 14.0)
    14.0
    """
    node = _table(section)
    if key not in node:
        return default
    value = node[key]
    if isinstance(default, float) and isinstance(value, int):
        return float(value)
    return value


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    return dict(_table(section_path))


def _table(section_path: str) -> dict:
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return {}
        node = node.get(part)
        if node is None:
            return {}
    return node if isinstance(node, dict) else {}


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
