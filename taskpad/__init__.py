"""
This is the main package for TaskPad.

- ``notes`` - the notes and tasks model, and the controller which runs the note workflows.
- ``media`` - camera capture and gallery pick collaborators, and the captured image file provider.
- ``gui`` - the TaskPad GUI.
- ``helpers`` - helpers used throughout TaskPad.

"""

from . import helpers

__all__ = ['helpers', ]
