import json
import os
from datetime import datetime
from pathlib import Path
import tempfile
import uuid

import pytest

# Keep the tool log out of the real home directory.
os.environ.setdefault("ROLLOUTLIST_HOME", str(Path(tempfile.gettempdir()) / "rolloutlist-tests"))

from rolloutlist.models import RolloutKey
from rolloutlist.naming import format_rollout_filename, rollout_day_dir


@pytest.fixture
def codex_home(tmp_path):
    return tmp_path / "codex"


@pytest.fixture
def write_rollout(codex_home):
    """Create a rollout file for (timestamp, id) and return its path."""

    def _write(ts: str, session_id: str, records=None):
        timestamp = datetime.strptime(ts, "%Y-%m-%dT%H-%M-%S")
        key = RolloutKey(timestamp=timestamp, id=uuid.UUID(session_id))
        day_dir = rollout_day_dir(codex_home / "sessions", timestamp)
        day_dir.mkdir(parents=True, exist_ok=True)
        path = day_dir / format_rollout_filename(key)
        if records is None:
            records = [{"type": "session_meta", "payload": {"id": session_id, "timestamp": ts}}]
        path.write_text("".join(json.dumps(r) + "\n" for r in records), encoding="utf-8")
        return path

    return _write
