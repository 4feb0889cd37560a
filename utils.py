import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

p = Path(__file__).resolve()

DIGITS_RE = re.compile(r"^\d+$")


def load_env_file(filepath: Union[str, Path] = Path(".env").resolve()) -> bool:
    """
    Load KEY=VALUE lines from a .env file into os.environ.

    - Blank lines and lines starting with '#' are skipped.
    - Surrounding single or double quotes around the value are stripped.
    - Variables already present in the environment are not overwritten.

    Returns True if the file was read, False if it does not exist.
    """
    path = Path(filepath)
    if not path.is_file():
        return False

    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            if key:
                os.environ.setdefault(key, value)
    return True


def read_log_level(env_name: str, default: int = logging.WARNING) -> int:
    raw = os.getenv(env_name, "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def parse_index(raw: str) -> Optional[int]:
    """Return the non-negative integer in `raw`, or None if it is not made of digits only."""
    if raw is None:
        return None
    s = raw.strip()
    if not DIGITS_RE.match(s):
        return None
    return int(s)


def join_non_empty(parts, separator: str = ", ") -> str:
    return separator.join(part for part in parts if part)
