"""Descending walk over the ``<year>/<month>/<day>`` session shards."""

from __future__ import annotations

import os
from pathlib import Path

from .models import RolloutKey
from .naming import parse_rollout_filename


def _parse_shard_name(name: str) -> int | None:
    if not name.isascii() or not name.isdigit():
        return None
    return int(name)


def collect_dirs_desc(parent: Path) -> list[tuple[int, Path]]:
    """Immediate numeric subdirectories of ``parent``, largest value first.

    Directory listing order is unspecified, so results are always sorted.
    Errors reading ``parent`` propagate to the caller.
    """
    dirs: list[tuple[int, Path]] = []
    with os.scandir(parent) as entries:
        for entry in entries:
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
            except OSError:
                continue
            value = _parse_shard_name(entry.name)
            if value is None:
                continue
            dirs.append((value, Path(entry.path)))
    dirs.sort(key=lambda pair: pair[0], reverse=True)
    return dirs


def collect_rollout_files(day_dir: Path) -> list[tuple[RolloutKey, Path]]:
    """Rollout files in ``day_dir`` sorted newest first (timestamp, then id)."""
    files: list[tuple[RolloutKey, Path]] = []
    with os.scandir(day_dir) as entries:
        for entry in entries:
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue
            key = parse_rollout_filename(entry.name)
            if key is None:
                continue
            files.append((key, Path(entry.path)))
    files.sort(key=lambda pair: pair[0], reverse=True)
    return files

