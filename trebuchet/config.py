"""Input path resolution for trebuchet runs.

The document lives at a fixed relative path unless the TREBUCHET_INPUT env
var or an explicit --input option points somewhere else.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

DEFAULT_INPUT_PATH = Path("input/day1.txt")
INPUT_ENV_VAR = "TREBUCHET_INPUT"


def resolve_input_path(
    override: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the document path: explicit override, then env var, then default.

    Args:
        override: Path given on the command line, if any.
        environ: Environment to consult. Defaults to os.environ.
    """
    if override is not None:
        return override
    source = os.environ if environ is None else environ
    raw = source.get(INPUT_ENV_VAR, "").strip()
    return Path(raw) if raw else DEFAULT_INPUT_PATH
