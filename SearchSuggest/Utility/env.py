"""Environment helpers (env loading)"""
import os
import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    if "=" not in line:
        return None
    key, val = line.split("=", 1)
    val = val.strip()
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        val = val[1:-1]
    return key.strip(), val


def load_env_file(filepath: str = ".env") -> int:
    """Load KEY=VALUE pairs into os.environ without overriding existing values.
    Returns the number of variables that were set.
    """
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return 0
    loaded = 0
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                pair = _parse_line(line)
                if pair is None:
                    continue
                key, val = pair
                if key not in os.environ:
                    os.environ[key] = val
                    loaded += 1
    except OSError as e:
        logger.warning("Could not read env file %s: %s", filepath, e)
    return loaded
