"""
Contains the ``NoteComposer`` and ``NoteEditor`` classes, which hold the state of the add-note and edit-note dialogs
independently of the GUI.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from taskpad import helpers
from taskpad.notes.model.note import Attachment, Note
from taskpad.notes.model.notestore import NoteStore

if TYPE_CHECKING:
    from taskpad.media.capture import MediaResult


def validate_fields(title: str, description: str) -> tuple[bool, str]:
    """
    Validates the fields of a note form.

    :param title: the title entered.
    :param description: the description entered.

    :returns:

        -success (:py:class:`bool`) - true if the note may be saved.

        -data (:py:class:`str`) - error message on failure, or empty string.

    """
    missing = []
    if helpers.is_blank(title):
        missing.append('title')
    if helpers.is_blank(description):
        missing.append('description')
    if missing:
        return False, "The {0} {1} missing.".format(' and '.join(missing), 'is' if len(missing) == 1 else 'are')
    return True, ''


class NoteComposer:
    """
    The note creation workflow. Media acquired while composing is collected in a pending buffer which belongs to this
    composer only, and is cleared when the note is committed or the workflow is cancelled.
    """

    IDLE: str = 'idle'
    COMPOSING: str = 'composing'
    COMMITTED: str = 'committed'
    CANCELLED: str = 'cancelled'

    def __init__(self):
        self.state: str = NoteComposer.IDLE
        self.title: str = ''
        self.description: str = ''
        self.is_task: bool = False
        self.due_date: str = ''
        self.pending: List[Attachment] = []
        self.note: Note | None = None

    def begin(self) -> None:
        """
        Starts composing a new note with empty fields and an empty pending buffer.
        """
        self._reset_fields()
        self.note = None
        self.state = NoteComposer.COMPOSING

    @property
    def is_composing(self) -> bool:
        return self.state == NoteComposer.COMPOSING

    def attach(self, attachment: Attachment) -> bool:
        """
        Appends an attachment to the pending buffer.

        :param attachment: the attachment to append.
        :return: True if appended, False if this composer is not composing.
        """
        if not self.is_composing:
            logging.warning('Dropped attachment {}: no note is being composed.'.format(attachment.uri))
            return False
        self.pending.append(attachment)
        return True

    def accept_media(self, result: MediaResult) -> bool:
        """
        Handles the completion of a capture or gallery pick. Successful results are appended in the order they arrive.

        :param result: the media result.
        :return: True if an attachment was appended.
        """
        if not result.ok:
            return False
        return self.attach(result.attachment)

    def commit(self, store: NoteStore) -> tuple[bool, str]:
        """
        Builds the note from the form and adds it to the store.

        :param store: the note store.

        :returns:

            -success (:py:class:`bool`) - true if the note was added.

            -data (:py:class:`str`) - success message, or error message on failure.

        """
        if not self.is_composing:
            return False, 'No note is being composed.'
        valid, error = validate_fields(self.title, self.description)
        if not valid:
            return False, error

        note = Note(
            title=self.title,
            description=self.description,
            is_task=self.is_task,
            due_date=self.due_date if self.is_task else None,
            attachments=tuple(self.pending))
        store.add(note)
        self.note = note
        self._reset_fields()
        self.state = NoteComposer.COMMITTED
        return True, 'Added note {}'.format(note.title)

    def cancel(self) -> None:
        """
        Discards the form and the pending buffer.
        """
        self._reset_fields()
        self.state = NoteComposer.CANCELLED

    def _reset_fields(self) -> None:
        self.title = ''
        self.description = ''
        self.is_task = False
        self.due_date = ''
        self.pending.clear()


class NoteEditor:
    """
    The note edit workflow. Only the title, description, task flag and due date can be edited; reminders and
    attachments are carried over unchanged.
    """

    VIEWING: str = 'viewing'
    EDITING: str = 'editing'
    SAVED: str = 'saved'
    CANCELLED: str = 'cancelled'

    def __init__(self):
        self.state: str = NoteEditor.VIEWING
        self.selected: Note | None = None
        self.title: str = ''
        self.description: str = ''
        self.is_task: bool = False
        self.due_date: str = ''

    def open(self, note: Note) -> None:
        """
        Loads a note for editing.

        :param note: the note selected in the list.
        """
        self.selected = note
        self.title = note.title
        self.description = note.description
        self.is_task = note.is_task
        self.due_date = note.due_date or ''
        self.state = NoteEditor.EDITING

    @property
    def is_editing(self) -> bool:
        return self.state == NoteEditor.EDITING and self.selected is not None

    def edited_note(self) -> Note:
        """
        :return: the selected note with the edited fields applied.
        """
        return self.selected.copy(
            title=self.title,
            description=self.description,
            is_task=self.is_task,
            due_date=self.due_date if self.is_task else None)

    def save(self, store: NoteStore) -> tuple[bool, str]:
        """
        Replaces the selected note in the store with the edited note.

        :param store: the note store.

        :returns:

            -success (:py:class:`bool`) - true if the note was saved.

            -data (:py:class:`str`) - success message, or error message on failure.

        """
        if not self.is_editing:
            return False, 'No note is being edited.'
        valid, error = validate_fields(self.title, self.description)
        if not valid:
            return False, error

        edited = self.edited_note()
        if not store.update(self.selected, edited):
            self._close(NoteEditor.CANCELLED)
            return False, 'Note {} no longer exists.'.format(edited.title)
        self.selected = edited
        self.state = NoteEditor.SAVED
        return True, 'Saved note {}'.format(edited.title)

    def delete(self, store: NoteStore) -> tuple[bool, str]:
        """
        Removes the selected note from the store and clears the selection.

        :param store: the note store.

        :returns:

            -success (:py:class:`bool`) - true if the note was removed.

            -data (:py:class:`str`) - success message, or error message if the note was already gone.

        """
        if self.selected is None:
            return False, 'No note is selected.'
        title = self.selected.title
        removed = store.remove(self.selected)
        self._close(NoteEditor.VIEWING)
        if not removed:
            return False, 'Note {} no longer exists.'.format(title)
        return True, 'Deleted note {}'.format(title)

    def cancel(self) -> None:
        """
        Discards the edits.
        """
        self._close(NoteEditor.CANCELLED)

    def _close(self, state: str) -> None:
        self.state = state
        self.selected = None
        self.title = ''
        self.description = ''
        self.is_task = False
        self.due_date = ''
