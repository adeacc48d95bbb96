"""
This is the view model package for the GUI. Here, you'll find the following:

- ``ui_mainwindow.py`` - Contains the ``Ui_MainWindow`` class which lays out the main window.
- ``mainwindow.py`` - Subclasses ``QMainWindow`` and ``Ui_MainWindow`` to set up the main window.
- ``ui_notedialog.py`` - Contains the ``Ui_NoteDialog`` class which lays out the add and edit note dialogs.
- ``notedialog.py`` - Contains the ``NoteDialog`` class which binds a dialog to a note workflow.
- ``taskpadapp.py`` - Contains the ``TaskPadApp`` class - the main view controller for the main window.
- ``threadedtasks.py`` - Contains the logging thread and the camera capture thread.
- ``gallery.py`` - Contains the ``DialogGalleryProvider`` class which picks files with a file dialog.
- ``noteitem.py`` - Contains the ``NoteItem`` and ``DeleteItem`` cells of the notes table.
"""
