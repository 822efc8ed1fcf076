"""
In-memory persistence collaborator firing model lifecycle hooks.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from recordhooks import Model
from recordhooks.utils import correlation_scope, get_logger


class NoteStore:
    """
    Keeps saved records in a dictionary keyed by ``id``.

    Every ``before_*`` trigger can veto the operation by returning ``False``;
    ``after_*`` results are ignored. Each operation runs in its own
    correlation scope so its hook log lines can be grouped.
    """

    def __init__(self) -> None:
        self.rows: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self.logger = get_logger("examples.notes")
        self.last_operation_id: Optional[str] = None

    def save(self, record: Model) -> bool:
        with correlation_scope() as operation_id:
            self.last_operation_id = operation_id
            return self._save(record)

    def _save(self, record: Model) -> bool:
        if not record.before_validation():
            return self._aborted(record, "before_validation")
        record.after_validation()

        if not record.before_save():
            return self._aborted(record, "before_save")
        creating = getattr(record, "id", None) is None
        if creating:
            if not record.before_create():
                return self._aborted(record, "before_create")
            record.id = self._next_id
            self._next_id += 1
        elif not record.before_update():
            return self._aborted(record, "before_update")

        self.rows[record.id] = record.to_dict()
        if creating:
            record.after_create()
        else:
            record.after_update()
        record.after_save()
        return True

    def update_values(self, record: Model, **values: Any) -> bool:
        with correlation_scope() as operation_id:
            self.last_operation_id = operation_id
            if getattr(record, "id", None) not in self.rows:
                self.logger.info(
                    "update_values skipped unsaved %r",
                    record,
                    extra={"model": type(record).__name__},
                )
                return False
            if not record.before_update_values():
                return self._aborted(record, "before_update_values")
            for name, value in values.items():
                setattr(record, name, value)
            self.rows[record.id].update(values)
            return True

    def destroy(self, record: Model) -> bool:
        with correlation_scope() as operation_id:
            self.last_operation_id = operation_id
            if not record.before_destroy():
                return self._aborted(record, "before_destroy")
            if not record.before_delete():
                return self._aborted(record, "before_delete")
            self.rows.pop(record.id, None)
            record.after_destroy()
            return True

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        return self.rows.get(record_id)

    def _aborted(self, record: Model, hook_name: str) -> bool:
        self.logger.info(
            "%s rejected %r",
            hook_name,
            record,
            extra={"hook": hook_name, "model": type(record).__name__},
        )
        return False
