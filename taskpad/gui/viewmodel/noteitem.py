"""
Contains the ``NoteItem`` and ``DeleteItem`` classes, the cells of the notes table.
"""

from __future__ import annotations

import darkdetect
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QIcon
from PyQt6.QtWidgets import QTableWidgetItem

from taskpad.helpers import DateUtil
from taskpad.notes.model.note import Note


class NoteItem(QTableWidgetItem):
    """
    A read-only cell in the notes table which remembers the ``uuid`` of the note in its row. Cells of overdue tasks are
    highlighted, in a colour which suits the current light or dark theme.
    """

    def __init__(self, note: Note, text: str, *args, **kwargs):
        """
        Initialises the cell.

        :param note: the note displayed in this row.
        :param text: the text of this cell.
        """
        super().__init__(text, *args, **kwargs)
        self.setFlags(Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEnabled)
        self.note_uuid: str = note.uuid
        self.setData(Qt.ItemDataRole.UserRole, note.uuid)
        if note.is_task and DateUtil.is_overdue(note.due_date):
            self.setForeground(QBrush(NoteItem.overdue_colour()))
            self.setToolTip('This task is overdue.')

    @staticmethod
    def overdue_colour() -> QColor:
        """
        Get the colour used for overdue tasks.

        :return: a light red on dark themes, a dark red otherwise.
        """
        return QColor('#ff8a80') if darkdetect.isDark() else QColor('#c62828')


class DeleteItem(NoteItem):
    """
    The cell which deletes the note in its row when clicked.
    """

    def __init__(self, note: Note, icon: QIcon, *args, **kwargs):
        """
        Initialises the cell.

        :param note: the note displayed in this row.
        :param icon: the delete icon.
        """
        super().__init__(note, '', *args, **kwargs)
        self.setIcon(icon)
        self.setToolTip('Delete note')
