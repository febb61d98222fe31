"""List Codex rollout session files newest-first with resumable cursors."""

__version__ = "0.1.0"
