"""
Contains the ``MainWindow`` class.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow

from taskpad.gui.viewmodel.ui_mainwindow import Ui_MainWindow


# noinspection PyUnresolvedReferences
class MainWindow(QMainWindow, Ui_MainWindow):
    """
    Subclasses ``QMainWindow`` and ``Ui_MainWindow`` to carry out initial set up for the main window. Closing the
    window emits :py:att:`closed` so that the view controller can shut down its threads.
    """

    #: Emitted when the window is closed.
    closed = pyqtSignal()

    def __init__(self, *args, **kwargs):
        super(MainWindow, self).__init__(*args, **kwargs)
        self.setupUi(self)
        self.splitter.setStretchFactor(0, 3)
        self.splitter.setStretchFactor(1, 2)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.closed.emit()
        super().closeEvent(event)
