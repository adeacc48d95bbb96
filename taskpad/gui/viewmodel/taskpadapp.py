"""
Contains the main view controller for the main window of the app.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import List

from PyQt6.QtCore import QSize
from PyQt6.QtWidgets import QApplication, QHeaderView, QMainWindow, QStyle, QTableWidgetItem

from taskpad import helpers
from taskpad.gui.viewmodel import threadedtasks
from taskpad.gui.viewmodel.gallery import DialogGalleryProvider
from taskpad.gui.viewmodel.mainwindow import MainWindow
from taskpad.gui.viewmodel.notedialog import NoteDialog
from taskpad.gui.viewmodel.noteitem import DeleteItem, NoteItem
from taskpad.media.capture import CommandCaptureProvider, MediaResult, acquire_pick
from taskpad.media.fileprovider import FileProvider
from taskpad.notes.controller import NoteController
from taskpad.notes.model.note import Attachment, Note
from taskpad.notes.model.workflow import NoteComposer, NoteEditor


class TaskPadApp(QMainWindow):
    """
    View controller for the main window. The :py:att``SETTINGS`` dictionary accepts the following keys:

    - ``log_level`` - the logging level. Can be 'debug', 'info', 'warning', 'error' or 'critical'.
    - ``sort_by_due_date`` - if '1', the sort checkbox starts checked.
    - ``capture_command`` - a custom camera capture command. ``{path}`` is replaced by the image file to write.
    - ``pictures_folder`` - where captured images are written. Defaults to the TaskPad ``Pictures`` folder.

    Settings are read from ``conf.json`` in the TaskPad data folder, if it exists. Notes are never saved.

    """

    #: Application settings
    SETTINGS = {
        'log_level': 'info',
        'sort_by_due_date': '0',
        'capture_command': '',
        'pictures_folder': ''
    }

    #: Authority of the locators given to captured images.
    FILE_PROVIDER_AUTHORITY: str = 'taskpad.fileprovider'

    #: Columns of the notes table.
    COLUMNS = ['Title', 'Due', 'Attachments', '']
    #: The column which deletes a note when clicked.
    DELETE_COLUMN: int = 3

    def __init__(self):
        """
        Initialise the window and load settings.
        """
        super().__init__()
        TaskPadApp.load_settings()
        self.logging_worker = threadedtasks.LoggingThread(TaskPadApp.SETTINGS['log_level'], log_stdout=True)

        self.pictures_path: Path = Path(TaskPadApp.SETTINGS['pictures_folder']) \
            if TaskPadApp.SETTINGS['pictures_folder'] else helpers.pictures_folder()
        self.file_provider = FileProvider(TaskPadApp.FILE_PROVIDER_AUTHORITY, self.pictures_path)
        self.capture_provider = CommandCaptureProvider(self.file_provider, TaskPadApp.SETTINGS['capture_command'])
        self.capture_workers: List[threadedtasks.CaptureTask] = []

        self.controller = NoteController(sort_by_due_date=TaskPadApp.SETTINGS['sort_by_due_date'] == '1')
        self.selected_uuid: str | None = None
        self.note_dialog: NoteDialog | None = None
        self.quitting: bool = False

        self.ui: MainWindow = MainWindow()
        self.gallery_provider = DialogGalleryProvider(self.ui)
        self.logging_worker.log_signal.connect(self.display_log)
        self.logging_worker.start()
        self.bootstrap_ui()
        self.ui.show()
        logging.info('TaskPad started. Captured images are saved in {}'.format(self.pictures_path))

    # GENERAL DECLARATIONS ---------------------------------------------------------------------------------------------

    @staticmethod
    def load_settings() -> None:
        """
        Load settings from configuration file.
        """
        conf_file = helpers.settings_folder() / 'conf.json'
        TaskPadApp.SETTINGS = helpers.merge_settings(TaskPadApp.SETTINGS, conf_file)

    def bootstrap_ui(self) -> None:
        """
        Bootstraps the TaskPad UI.
        """
        self.ui.tbl_notes.setColumnCount(len(TaskPadApp.COLUMNS))
        for col, heading in enumerate(TaskPadApp.COLUMNS):
            self.ui.tbl_notes.setHorizontalHeaderItem(col, QTableWidgetItem(heading))
        header = self.ui.tbl_notes.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.ui.tbl_notes.setIconSize(QSize(18, 18))

        sort_by_due_date = TaskPadApp.SETTINGS['sort_by_due_date'] == '1'
        self.ui.cb_sort_due_date.setChecked(sort_by_due_date)
        self.update_sort_label(sort_by_due_date)

        self.ui.btn_add_note.clicked.connect(self.show_add_dialog)
        self.ui.actionAdd_Note.triggered.connect(self.show_add_dialog)
        self.ui.actionQuit_TaskPad.triggered.connect(self.quit_gracefully)
        self.ui.closed.connect(self.quit_gracefully)
        self.ui.txt_search.textChanged.connect(self.controller.search)
        self.ui.cb_sort_due_date.toggled.connect(self.handle_sort_toggle)
        self.ui.tbl_notes.cellClicked.connect(self.handle_note_cell)
        self.ui.tbl_notes.cellDoubleClicked.connect(self.handle_note_open)
        self.ui.btn_clear_logs.clicked.connect(self.clear_logs)

        self.controller.projection.subscribe(self.display_notes_table)
        self.display_notes_table(self.controller.visible_notes())
        self.update_status()

    def clear_logs(self) -> None:
        """
        Clears the log view.
        """
        self.ui.txt_log_display.clear()

    def display_log(self, message: str) -> None:
        """
        Displays a log message.

        :param message: the message to display.
        """
        self.ui.txt_log_display.append(message)
        self.ui.txt_log_display.verticalScrollBar().setValue(self.ui.txt_log_display.verticalScrollBar().maximum())

    def update_status(self) -> None:
        """
        Shows the number of notes displayed in the status bar.
        """
        total = len(self.controller.store)
        shown = len(self.controller.visible_notes())
        status = '{} notes'.format(total) if shown == total else '{0} of {1} notes'.format(shown, total)
        self.ui.statusbar.showMessage(status)

    # NOTE LIST HANDLING -----------------------------------------------------------------------------------------------
    def handle_sort_toggle(self, checked: bool) -> None:
        """
        Triggered when the sort checkbox is clicked.

        :param checked: True if tasks should be sorted by due date.
        """
        self.update_sort_label(checked)
        self.controller.sort_by_due_date(checked)

    def update_sort_label(self, sort_by_due_date: bool) -> None:
        self.ui.lbl_sort_mode.setText('Task due date' if sort_by_due_date else 'Title')

    def display_notes_table(self, notes: List[Note]) -> None:
        """
        Displays the notes in the table. Called every time the displayed list is recomputed.

        :param notes: the filtered and sorted notes.
        """
        delete_icon = self.ui.style().standardIcon(QStyle.StandardPixmap.SP_TrashIcon)
        self.ui.tbl_notes.setUpdatesEnabled(False)
        self.ui.tbl_notes.setRowCount(0)
        for row, note in enumerate(notes):
            self.ui.tbl_notes.insertRow(row)
            self.ui.tbl_notes.setItem(row, 0, NoteItem(note, note.title))
            self.ui.tbl_notes.setItem(row, 1, NoteItem(note, (note.due_date or '') if note.is_task else ''))
            self.ui.tbl_notes.setItem(row, 2, NoteItem(note, str(len(note.attachments)) if note.attachments else ''))
            self.ui.tbl_notes.setItem(row, TaskPadApp.DELETE_COLUMN, DeleteItem(note, delete_icon))
        self.ui.tbl_notes.setUpdatesEnabled(True)

        visible = {note.uuid: note for note in notes}
        if self.selected_uuid in visible:
            self.show_preview(visible[self.selected_uuid])
        else:
            self.selected_uuid = None
            self.ui.txt_preview.clear()
        self.update_status()

    def _note_at(self, row: int, col: int) -> Note | None:
        item = self.ui.tbl_notes.item(row, col)
        if not isinstance(item, NoteItem):
            return None
        return self.controller.store.get(item.note_uuid)

    def handle_note_cell(self, row: int, col: int) -> None:
        """
        Selects the clicked note, or deletes it if the delete cell was clicked.

        :param row: the row clicked.
        :param col: the column clicked.
        """
        note = self._note_at(row, col)
        if note is None:
            return
        if col == TaskPadApp.DELETE_COLUMN:
            if self.selected_uuid == note.uuid:
                self.selected_uuid = None
            self.controller.delete_note(note)
            return
        self.selected_uuid = note.uuid
        self.show_preview(note)

    def handle_note_open(self, row: int, col: int) -> None:
        """
        Opens the edit dialog for the double-clicked note.

        :param row: the row clicked.
        :param col: the column clicked.
        """
        if col == TaskPadApp.DELETE_COLUMN:
            return
        note = self._note_at(row, col)
        if note is not None:
            self.show_edit_dialog(note)

    def show_preview(self, note: Note) -> None:
        """
        Renders a note in the preview pane. The description is rendered as Markdown.

        :param note: the note to render.
        """
        parts = ['<h2>{}</h2>'.format(html.escape(note.title))]
        if note.is_task:
            parts.append('<p><i>Task due {}</i></p>'.format(html.escape(note.due_date or 'whenever')))
        parts.append(helpers.markdown_to_html(note.description))
        if note.reminders:
            parts.append('<p><b>Reminders</b><br>{}</p>'.format(
                '<br>'.join(html.escape(reminder) for reminder in note.reminders)))
        for attachment in note.attachments:
            parts.append(self.render_attachment(attachment))
        self.ui.txt_preview.setHtml('\n'.join(parts))

    def render_attachment(self, attachment: Attachment) -> str:
        """
        Renders an attachment for the preview pane. Images which can be located on disk are shown inline.

        :param attachment: the attachment to render.
        :return: an HTML fragment.
        """
        caption = html.escape(str(attachment))
        if attachment.is_image:
            if self.file_provider.owns(attachment.uri):
                source = self.file_provider.get_file_for_uri(attachment.uri).as_uri()
            else:
                source = attachment.uri
            return '<p><img src="{0}" width="240"><br><small>{1}</small></p>'.format(html.escape(source), caption)
        return '<p><a href="{0}">{1}</a></p>'.format(html.escape(attachment.uri), caption)

    # ADD DIALOG -------------------------------------------------------------------------------------------------------
    def show_add_dialog(self) -> None:
        """
        Shows the add note dialog. The dialog's pending attachments belong to a new composer, so nothing carries over
        from an earlier dialog.
        """
        composer = self.controller.start_composing()
        dialog = NoteDialog(NoteDialog.MODE_ADD, self.ui)
        dialog.show_attachments(composer.pending)
        dialog.capture_requested.connect(lambda: self.request_capture(composer, dialog))
        dialog.gallery_requested.connect(lambda: self.request_pick(composer, dialog))
        dialog.confirm_requested.connect(lambda: self.handle_add_confirm(composer, dialog))
        dialog.rejected.connect(lambda: self.controller.cancel_composing(composer))
        self.note_dialog = dialog
        dialog.open()

    def handle_add_confirm(self, composer: NoteComposer, dialog: NoteDialog) -> None:
        """
        Adds the note. Blank titles or descriptions leave the dialog open.

        :param composer: the add-note workflow.
        :param dialog: the add note dialog.
        """
        dialog.apply_to(composer)
        success, data = self.controller.add_note(composer)
        if not success:
            dialog.show_status(data)
            return
        dialog.accept()

    def request_capture(self, composer: NoteComposer, dialog: NoteDialog) -> None:
        """
        Starts a camera capture in a separate thread. Several captures may be in flight; each one is attached when it
        completes.

        :param composer: the add-note workflow which will receive the image.
        :param dialog: the add note dialog.
        """
        worker = threadedtasks.CaptureTask(self.capture_provider, self.pictures_path)
        worker.result_signal.connect(lambda result: self.handle_media_result(composer, dialog, result))
        worker.finished.connect(lambda: self.capture_workers.remove(worker) if worker in self.capture_workers else None)
        self.capture_workers.append(worker)
        dialog.show_status('Capturing image...')
        worker.start()

    def request_pick(self, composer: NoteComposer, dialog: NoteDialog) -> None:
        """
        Shows the gallery picker.

        :param composer: the add-note workflow which will receive the file.
        :param dialog: the add note dialog.
        """
        self.handle_media_result(composer, dialog, acquire_pick(self.gallery_provider))

    def handle_media_result(self, composer: NoteComposer, dialog: NoteDialog, result: MediaResult) -> None:
        """
        Attaches acquired media to the note being composed and reports failures in the dialog.

        :param composer: the add-note workflow which requested the media.
        :param dialog: the add note dialog.
        :param result: the outcome of the capture or pick.
        """
        success, data = NoteController.handle_media_result(composer, result)
        if not composer.is_composing:
            return
        dialog.show_attachments(composer.pending)
        if success:
            dialog.show_status('')
        elif result.status == MediaResult.UNAVAILABLE:
            dialog.show_status('The capture did not happen: no camera is available.')
        elif result.status == MediaResult.FAILED:
            dialog.show_status('The capture did not happen.')
        else:
            dialog.show_status('')

    # EDIT DIALOG ------------------------------------------------------------------------------------------------------
    def show_edit_dialog(self, note: Note) -> None:
        """
        Shows the edit note dialog.

        :param note: the note to edit.
        """
        success, data = self.controller.start_editing(note)
        if not success:
            return
        editor: NoteEditor = data
        dialog = NoteDialog(NoteDialog.MODE_EDIT, self.ui)
        dialog.load(editor.title, editor.description, editor.is_task, editor.due_date)
        dialog.show_attachments(note.attachments)
        dialog.confirm_requested.connect(lambda: self.handle_edit_save(editor, dialog))
        dialog.delete_requested.connect(lambda: self.handle_edit_delete(editor, dialog))
        dialog.rejected.connect(editor.cancel)
        self.note_dialog = dialog
        dialog.open()

    def handle_edit_save(self, editor: NoteEditor, dialog: NoteDialog) -> None:
        """
        Saves the edited note.

        :param editor: the edit-note workflow.
        :param dialog: the edit note dialog.
        """
        dialog.apply_to(editor)
        success, data = self.controller.save_note(editor)
        if not success:
            dialog.show_status(data)
            return
        dialog.accept()

    def handle_edit_delete(self, editor: NoteEditor, dialog: NoteDialog) -> None:
        """
        Deletes the edited note and clears the selection.

        :param editor: the edit-note workflow.
        :param dialog: the edit note dialog.
        """
        self.selected_uuid = None
        self.controller.delete_edited_note(editor)
        dialog.accept()

    # SHUTDOWN ---------------------------------------------------------------------------------------------------------
    def quit_gracefully(self) -> None:
        """
        Quits TaskPad. Waits for running captures, stops logging and discards all notes.
        """
        if self.quitting:
            return
        self.quitting = True
        for worker in list(self.capture_workers):
            worker.quit()
            worker.wait()
        self.capture_workers.clear()
        if self.logging_worker:
            self.logging_worker.teardown_logging()
            self.logging_worker.quit()
        self.controller.projection.close()
        self.controller.store.clear()
        QApplication.quit()
