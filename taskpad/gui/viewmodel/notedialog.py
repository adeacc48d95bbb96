"""
Contains the ``NoteDialog`` class, used both to add a note and to edit one.
"""

from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QDialog, QListWidgetItem, QWidget

from taskpad import helpers
from taskpad.gui.viewmodel.ui_notedialog import Ui_NoteDialog
from taskpad.notes.model.note import Attachment
from taskpad.notes.model.workflow import NoteComposer, NoteEditor


# noinspection PyUnresolvedReferences
class NoteDialog(QDialog, Ui_NoteDialog):
    """
    The add and edit note dialog. In ``MODE_ADD`` the media buttons are shown and the Delete button is hidden; in
    ``MODE_EDIT`` it is the other way round and attachments are shown read-only.

    The confirm button is only enabled while both the title and the description are filled in.
    """

    MODE_ADD: str = 'add'
    MODE_EDIT: str = 'edit'

    #: Emitted when Capture Image is clicked.
    capture_requested = pyqtSignal()
    #: Emitted when Pick From Gallery is clicked.
    gallery_requested = pyqtSignal()
    #: Emitted when the confirm (Add or Save) button is clicked.
    confirm_requested = pyqtSignal()
    #: Emitted when Delete is clicked.
    delete_requested = pyqtSignal()

    def __init__(self, mode: str, parent: QWidget | None = None):
        """
        Initialises the dialog.

        :param mode: ``MODE_ADD`` or ``MODE_EDIT``.
        :param parent: the main window.
        """
        super().__init__(parent)
        self.setupUi(self)
        self.mode: str = mode
        if mode == NoteDialog.MODE_ADD:
            self.setWindowTitle('Add Note')
            self.btn_confirm.setText('Add')
            self.btn_delete.setVisible(False)
        else:
            self.setWindowTitle('Edit Note')
            self.btn_confirm.setText('Save')
            self.btn_capture.setVisible(False)
            self.btn_gallery.setVisible(False)

        self.btn_capture.clicked.connect(self.capture_requested)
        self.btn_gallery.clicked.connect(self.gallery_requested)
        self.btn_confirm.clicked.connect(self.confirm_requested)
        self.btn_delete.clicked.connect(self.delete_requested)
        self.btn_cancel.clicked.connect(self.reject)
        self.cb_task.toggled.connect(self.handle_task_toggle)
        self.txt_title.textChanged.connect(self.validate_form)
        self.txt_description.textChanged.connect(self.validate_form)
        self.handle_task_toggle(False)
        self.validate_form()

    def load(self, title: str, description: str, is_task: bool, due_date: str) -> None:
        """
        Fills in the form.

        :param title: the note title.
        :param description: the note description.
        :param is_task: True if the note is a task.
        :param due_date: the due date of the task.
        """
        self.txt_title.setText(title)
        self.txt_description.setPlainText(description)
        self.cb_task.setChecked(is_task)
        self.txt_due_date.setText(due_date)
        self.handle_task_toggle(is_task)
        self.validate_form()

    def apply_to(self, workflow: NoteComposer | NoteEditor) -> None:
        """
        Copies the form fields to a note workflow.

        :param workflow: the add or edit workflow.
        """
        workflow.title = self.txt_title.text()
        workflow.description = self.txt_description.toPlainText()
        workflow.is_task = self.cb_task.isChecked()
        workflow.due_date = self.txt_due_date.text().strip()

    def show_attachments(self, attachments: Iterable[Attachment]) -> None:
        """
        Lists attachments in the dialog.

        :param attachments: the attachments to list.
        """
        self.lst_attachments.clear()
        for attachment in attachments:
            item = QListWidgetItem(str(attachment))
            item.setToolTip(attachment.uri)
            self.lst_attachments.addItem(item)
        self.gb_media.setVisible(self.mode == NoteDialog.MODE_ADD or self.lst_attachments.count() > 0)

    def show_status(self, message: str) -> None:
        self.lbl_status.setText(message)

    def handle_task_toggle(self, checked: bool) -> None:
        """
        Shows the due date field for tasks only.

        :param checked: True if the task checkbox is checked.
        """
        self.lbl_due_date.setVisible(checked)
        self.txt_due_date.setVisible(checked)

    def validate_form(self) -> None:
        """
        Enables the confirm button if the title and description are not blank.
        """
        self.btn_confirm.setEnabled(not helpers.is_blank(self.txt_title.text()) and
                                    not helpers.is_blank(self.txt_description.toPlainText()))
