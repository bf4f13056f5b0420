from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict


logger = logging.getLogger("eehsawa.env")


def load_local_env(env_path: Path | str = Path(".env"), *, override: bool = False) -> Dict[str, str]:
    """Load key=value pairs from a local .env file into os.environ.

    Variables already present in the environment are kept unless ``override``
    is set. Returns the pairs that were applied.
    """
    path = Path(env_path)
    if not path.is_file():
        return {}

    applied: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            logger.warning("Skipping malformed .env line: %s", raw_line)
            continue

        key, value = line.split("=", 1)
        clean_key = key.strip()
        clean_value = value.strip().strip('"').strip("'")
        if not clean_key:
            logger.warning("Skipping .env line without a key: %s", raw_line)
            continue
        if clean_key in os.environ and not override:
            continue
        os.environ[clean_key] = clean_value
        applied[clean_key] = clean_value

    if applied:
        logger.info("Loaded %d variable(s) from %s", len(applied), path)
    return applied
