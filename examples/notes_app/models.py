"""
Data models for the recordhooks notes example.
"""

from __future__ import annotations

from datetime import datetime, timezone

from recordhooks import Model, hook


class Note(Model):
    class Meta:
        hooks = ("before_publish",)

    def __init__(self, **values):
        values.setdefault("id", None)
        values.setdefault("body", "")
        values.setdefault("locked", False)
        values.setdefault("published", False)
        values.setdefault("history", [])
        super().__init__(**values)

    @hook("after_initialize")
    def strip_title(self):
        self.title = (getattr(self, "title", "") or "").strip()

    @hook("before_validation")
    def default_body(self):
        if not self.body:
            self.body = self.title

    @hook("before_save")
    def require_title(self):
        if not self.title:
            return False

    @hook("before_save", tag="touch")
    def touch(self):
        self.updated_at = datetime.now(timezone.utc)

    def ensure_unlocked(self):
        return not self.locked

    def publish(self) -> bool:
        if not self.before_publish():
            return False
        self.published = True
        return True


Note.before_destroy("ensure_unlocked")
Note.before_publish(block=lambda note: len(note.body) >= 10)
Note.after_create("audit", lambda note: note.history.append("created"))
Note.after_update("audit", lambda note: note.history.append("updated"))
Note.before_delete(block=lambda note: note.history.append("deleting"))
