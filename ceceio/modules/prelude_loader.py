from __future__ import annotations
from pathlib import Path
from typing import Protocol

from ceceio.config import get_prelude_root

PRELUDE_FILE = 'core.cec'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the prelude file into the session; FileNotFoundError if it is missing."""
    path = prelude_path()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{path}' (set CECEIO_PRELUDE_PATH)")
    itp.eval_prelude(path.read_text(encoding='utf-8'))
