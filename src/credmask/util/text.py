from __future__ import annotations

"""Text IO utilities.

CONTRACT
- Inputs: Path
- Outputs:
  - File content as string, or as lines without their trailing newline
- Invariants:
  - Reads as utf-8
- Failure:
  - Raises FileNotFoundError/IOError
"""

from collections.abc import Iterator
from pathlib import Path


def read_text_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def iter_lines(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")
