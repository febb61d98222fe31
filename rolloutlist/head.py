from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import HEAD_RECORD_LIMIT, configure_logging
from .utils import safe_json_loads

logger = configure_logging()


def read_head(path: Path, max_records: int = HEAD_RECORD_LIMIT) -> list[Any]:
    """Parse up to ``max_records`` JSON values from the leading lines of ``path``.

    Blank lines and lines that are not valid JSON are skipped. Reading stops
    as soon as enough records were collected, so cost stays bounded on large
    files. A file that cannot be opened yields an empty head.
    """
    head: list[Any] = []
    if max_records <= 0:
        return head
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            for line in handle:
                text = line.strip()
                if not text:
                    continue
                record, error = safe_json_loads(text)
                if error:
                    continue
                head.append(record)
                if len(head) >= max_records:
                    break
    except OSError as exc:
        logger.warning("failed to read head of %s: %s", path, exc)
    return head
