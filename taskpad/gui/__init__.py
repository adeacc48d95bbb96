"""
This is the GUI package for TaskPad.

- ``TaskPad.py`` - the application entry point.
- ``viewmodel`` - the windows, dialogs and worker threads of the GUI.

"""
