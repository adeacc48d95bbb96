"""
Main application entry point. Displays the main window.
"""
import sys

from PyQt6.QtWidgets import QApplication

from taskpad.gui.viewmodel.taskpadapp import TaskPadApp


def main():
    app = QApplication(sys.argv)
    app.setApplicationName('TaskPad')
    tp = TaskPadApp()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
