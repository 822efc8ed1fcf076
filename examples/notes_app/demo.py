"""
Utility helpers for running the recordhooks notes example end-to-end.
"""

from __future__ import annotations

from typing import Any, Dict

from .models import Note
from .store import NoteStore


def run_demo() -> Dict[str, Any]:
    """
    Create, update, publish and delete notes, reporting what the hooks allowed.
    """

    store = NoteStore()
    draft = Note(title="  Release checklist  ", body="Tag, build, upload, announce.")
    untitled = Note(title="   ")
    locked = Note(title="Pinned", locked=True)

    outcome = {
        "saved_draft": store.save(draft),
        "saved_untitled": store.save(untitled),
        "saved_locked": store.save(locked),
    }
    draft.body = "Tag, build, upload, announce, celebrate."
    outcome["updated_draft"] = store.save(draft)
    outcome["published_draft"] = draft.publish()
    outcome["destroyed_locked"] = store.destroy(locked)
    outcome["destroyed_draft"] = store.destroy(draft)
    outcome["draft_history"] = list(draft.history)
    outcome["remaining_ids"] = sorted(store.rows)
    return outcome


if __name__ == "__main__":
    for key, value in run_demo().items():
        print(f"{key}: {value}")
