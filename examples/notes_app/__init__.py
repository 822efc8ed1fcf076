"""
Notes sample application showcasing recordhooks lifecycle hooks.
"""

from .demo import run_demo
from .models import Note
from .store import NoteStore

__all__ = ["Note", "NoteStore", "run_demo"]
