"""
This is the notes package of TaskPad. Here, you'll find the following:

- ``model`` - the note model, the note store, the displayed projection and the add/edit workflows.
- ``controller`` - the ``NoteController`` class which runs note operations for the GUI.

"""
