"""
This is the model of the notes part of TaskPad. Here, you'll find the following:

- ``note.py`` - Contains the ``Note`` and ``Attachment`` classes that represent a note and an attached media item
  respectively.
- ``notestore.py`` - Contains the ``NoteStore`` class which holds every note in display order and notifies subscribers
  of changes.
- ``projection.py`` - Filters and sorts the notes for display, and contains the ``NoteProjection`` class which keeps
  the displayed list up to date.
- ``workflow.py`` - Contains the ``NoteComposer`` and ``NoteEditor`` classes for the add and edit workflows.

"""

from . import note, notestore, projection, workflow

__all__ = ['note', 'notestore', 'projection', 'workflow', ]
