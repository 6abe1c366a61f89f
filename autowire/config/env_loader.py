"""Loads KEY=VALUE files: ``.env/<name>.env`` and alias binding files.

Supports:
- Comments (lines starting with #)
- Blank lines
- Quoted values (single or double quotes are stripped)
- Inline comments after values are NOT stripped (to keep values predictable)
"""

from pathlib import Path

# Project root: two levels up from autowire/config/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env_file(env_name: str = "local", project_root: Path | None = None) -> dict[str, str]:
    """Load .env/<env_name>.env and return as dict. Returns empty dict if file is missing."""
    root = project_root or _PROJECT_ROOT
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.exists():
        return {}
    return _parse_env_file(env_file)


def load_bindings_file(path: str | Path) -> dict[str, str]:
    """Load ``identifier=target`` alias lines. A missing file is an error."""
    bindings_file = Path(path)
    if not bindings_file.exists():
        raise FileNotFoundError(f"bindings file not found: {bindings_file}")
    bindings = _parse_env_file(bindings_file)
    empty = [key for key, target in bindings.items() if not key or not target]
    if empty:
        raise ValueError(f"Empty identifier or target in {bindings_file}: {', '.join(empty)}")
    return bindings


def _parse_env_file(path: Path) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        # Strip surrounding quotes
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        result[key] = value
    return result
