"""Loaders for channel-number text files.

Input format: one record per line, channel numbers separated by whitespace.
Carriage returns are dropped and blank lines are skipped.
"""

import logging
import re
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def split_channel_lines(text: str) -> List[List[str]]:
    lines: List[List[str]] = []
    for line in text.replace("\r", "").split("\n"):
        tokens = line.split()
        if tokens:
            lines.append(tokens)
    return lines


def load_channel_lines(path: str | Path) -> List[List[str]]:
    p = Path(path)
    text = p.read_text(encoding="utf-8", errors="ignore")
    lines = split_channel_lines(text)
    logger.info(f"Loaded {len(lines)} channel lines from {p}")
    return lines


# Plain decimal numeral with optional exponent; no "_", "inf" or "nan".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_channel_token(token: str) -> float | None:
    """Parse one channel token; None if it is not a plain numeral."""
    if not _NUMBER_RE.fullmatch(token):
        return None
    return float(token)
