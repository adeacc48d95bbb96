"""
This is the note controller. It owns the note store and the displayed projection, and runs the add, edit and delete
workflows. It is called by the GUI, but can be used separately if imported.
"""
from __future__ import annotations

import logging
from typing import List

from taskpad.media.capture import MediaResult
from taskpad.notes.model.note import Note
from taskpad.notes.model.notestore import NoteStore
from taskpad.notes.model.projection import NoteProjection
from taskpad.notes.model.workflow import NoteComposer, NoteEditor


class NoteController:
    """
    Entry point for every note operation. Each operation returns a ``(success, data)`` tuple and logs its outcome;
    none of them raise.
    """

    def __init__(self, store: NoteStore | None = None, search_text: str = '', sort_by_due_date: bool = False):
        """
        Creates the controller.

        :param store: the note store. A new, empty store is created if not given.
        :param search_text: the initial search text.
        :param sort_by_due_date: the initial sort mode.
        """
        self.store: NoteStore = store if store is not None else NoteStore()
        self.projection: NoteProjection = NoteProjection(self.store, search_text, sort_by_due_date)

    # VIEW -------------------------------------------------------------------------------------------------------------
    def visible_notes(self) -> List[Note]:
        """
        :return: the notes currently displayed, filtered and sorted.
        """
        return list(self.projection.notes)

    def search(self, search_text: str) -> None:
        """
        Sets the search text.

        :param search_text: the text typed into the search box.
        """
        self.projection.set_search_text(search_text)
        logging.debug('Search text set to "{0}", {1} notes shown.'.format(search_text, len(self.projection.notes)))

    def sort_by_due_date(self, enabled: bool) -> None:
        """
        Sets the sort mode.

        :param enabled: if True, tasks are sorted by due date; otherwise all notes are sorted by title.
        """
        self.projection.set_sort_by_due_date(enabled)
        logging.debug('Sorting by {}.'.format('task due date' if enabled else 'title'))

    # ADD --------------------------------------------------------------------------------------------------------------
    @staticmethod
    def start_composing() -> NoteComposer:
        """
        Starts the add-note workflow.

        :return: a composer in the ``COMPOSING`` state with an empty pending buffer.
        """
        composer = NoteComposer()
        composer.begin()
        return composer

    @staticmethod
    def handle_media_result(composer: NoteComposer, result: MediaResult) -> tuple[bool, str]:
        """
        Handles the completion of a capture or gallery pick for the note being composed.

        :param composer: the add-note workflow which requested the media.
        :param result: the outcome of the request.

        :returns:

            -success (:py:class:`bool`) - true if an attachment was added to the pending buffer.

            -data (:py:class:`str`) - success message, or the reason no attachment was added.

        """
        if result.status == MediaResult.CANCELLED:
            logging.debug(result.message)
            return False, result.message
        if not result.ok:
            error = 'Media was not attached: {}'.format(result.message)
            logging.warning(error)
            return False, error
        if not composer.accept_media(result):
            error = 'Media {} arrived after the note dialog was closed.'.format(result.attachment.uri)
            logging.warning(error)
            return False, error
        debug_msg = 'Attached {0}. Pending attachments: {1}'.format(
            result.attachment, [str(attachment) for attachment in composer.pending])
        logging.debug(debug_msg)
        return True, debug_msg

    def add_note(self, composer: NoteComposer) -> tuple[bool, str]:
        """
        Commits the note being composed to the store. Blank titles or descriptions are refused.

        :param composer: the add-note workflow.

        :returns:

            -success (:py:class:`bool`) - true if the note was added.

            -data (:py:class:`str`) - success message, or error message on failure.

        """
        success, data = composer.commit(self.store)
        if not success:
            logging.debug('Note not added: {}'.format(data))
            return False, data
        logging.info(data)
        return True, data

    @staticmethod
    def cancel_composing(composer: NoteComposer) -> None:
        """
        Cancels the add-note workflow, discarding its pending attachments.

        :param composer: the add-note workflow.
        """
        discarded = len(composer.pending)
        composer.cancel()
        logging.debug('Add note cancelled, {} pending attachments discarded.'.format(discarded))

    # EDIT -------------------------------------------------------------------------------------------------------------
    def start_editing(self, target: Note | str) -> tuple[bool, NoteEditor] | tuple[bool, str]:
        """
        Starts the edit-note workflow for a note in the store.

        :param target: the note, or its ``uuid``.

        :returns:

            -success (:py:class:`bool`) - true if the note was found.

            -data (:py:class:`NoteEditor` | :py:class:`str`) - an editor in the ``EDITING`` state, or error message.

        """
        uuid = target.uuid if isinstance(target, Note) else target
        note = self.store.get(uuid)
        if note is None:
            error = 'Cannot edit note {}: it is no longer in the store.'.format(uuid)
            logging.warning(error)
            return False, error
        editor = NoteEditor()
        editor.open(note)
        return True, editor

    def save_note(self, editor: NoteEditor) -> tuple[bool, str]:
        """
        Saves the edited note, keeping its position, reminders and attachments.

        :param editor: the edit-note workflow.

        :returns:

            -success (:py:class:`bool`) - true if the note was saved.

            -data (:py:class:`str`) - success message, or error message on failure.

        """
        success, data = editor.save(self.store)
        if not success:
            logging.debug('Note not saved: {}'.format(data))
            return False, data
        logging.info(data)
        return True, data

    def delete_edited_note(self, editor: NoteEditor) -> tuple[bool, str]:
        """
        Deletes the note being edited.

        :param editor: the edit-note workflow.

        :returns:

            -success (:py:class:`bool`) - true if the note was deleted.

            -data (:py:class:`str`) - success message, or error message if it was already gone.

        """
        success, data = editor.delete(self.store)
        if not success:
            logging.warning(data)
            return False, data
        logging.info(data)
        return True, data

    # DELETE -----------------------------------------------------------------------------------------------------------
    def delete_note(self, target: Note | str) -> tuple[bool, str]:
        """
        Deletes a note from the list. Deleting a note which is already gone does nothing.

        :param target: the note, or its ``uuid``.

        :returns:

            -success (:py:class:`bool`) - true if the note was deleted.

            -data (:py:class:`str`) - success message, or error message if it was already gone.

        """
        note = self.store.get(target.uuid if isinstance(target, Note) else target)
        if note is None or not self.store.remove(note):
            error = 'Note is no longer in the store.'
            logging.warning(error)
            return False, error
        data = 'Deleted note {}'.format(note.title)
        logging.info(data)
        return True, data
