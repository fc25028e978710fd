"""Reading and writing the line-weight table as raw binary doubles."""

from __future__ import annotations

import os
import struct
from collections.abc import Sequence
from pathlib import Path

LINE_COUNT = 76
DEFAULT_WEIGHT = 3.0
DEFAULT_PATH = "data/line.dat"

_LAYOUT = struct.Struct(f"<{LINE_COUNT}d")


def init_weights(path: str | os.PathLike[str] = DEFAULT_PATH, overwrite: bool = False) -> bool:
    """Write a default table; keep an existing file unless ``overwrite``.

    Returns True when a file was written.
    """
    target = Path(path)
    if target.exists() and not overwrite:
        return False
    save_weights(target, [DEFAULT_WEIGHT] * LINE_COUNT)
    return True


def load_weights(path: str | os.PathLike[str] = DEFAULT_PATH) -> list[float]:
    """Read the weight table from ``path``."""
    data = Path(path).read_bytes()
    if len(data) < _LAYOUT.size:
        raise ValueError(
            f"weight file holds {len(data)} bytes, {_LAYOUT.size} are needed"
        )
    return list(_LAYOUT.unpack_from(data))


def save_weights(path: str | os.PathLike[str], weights: Sequence[float]) -> None:
    """Write the weight table to ``path``, replacing any previous contents."""
    values = [float(w) for w in weights]
    if len(values) != LINE_COUNT:
        raise ValueError(f"expected {LINE_COUNT} weights, got {len(values)}")
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(_LAYOUT.pack(*values))