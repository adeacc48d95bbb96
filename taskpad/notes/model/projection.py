"""
Derives the list of notes shown in the main window from the note store, the search text and the sort mode.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from taskpad.notes.model.note import Note
from taskpad.notes.model.notestore import NoteStore


def matches(note: Note, search_text: str) -> bool:
    """
    Checks whether a note matches the search text. The match is a case-insensitive substring match on the title or
    the description. An empty search text matches every note.

    :param note: the note to check.
    :param search_text: the text typed into the search box.

    :return: True if the note should be displayed.
    """
    needle = search_text.lower()
    return needle in note.title.lower() or needle in note.description.lower()


def sort_key(note: Note, sort_by_due_date: bool) -> tuple[int, str]:
    """
    Get the sort key of a note. Tasks are keyed by due date when sorting by due date; every other note is keyed by
    title. Both kinds of key are compared against each other in the same pass, so a title can sort between two due
    dates. A task with no due date sorts before everything else.

    :param note: the note.
    :param sort_by_due_date: True if the user chose to sort tasks by due date.

    :return: the sort key.
    """
    key = note.due_date if sort_by_due_date and note.is_task else note.title
    return (0, '') if key is None else (1, key)


def project(notes: Iterable[Note], search_text: str = '', sort_by_due_date: bool = False) -> List[Note]:
    """
    Filters and sorts notes for display. The sort is stable and ``notes`` is left untouched.

    :param notes: the notes, in store order.
    :param search_text: the text typed into the search box.
    :param sort_by_due_date: True if tasks should be sorted by due date.

    :return: a new list of the notes to display.
    """
    return sorted((note for note in notes if matches(note, search_text)),
                  key=lambda note: sort_key(note, sort_by_due_date))


class NoteProjection:
    """
    Keeps the displayed list of notes up to date. The list is recomputed whenever the store changes, the search text
    changes or the sort mode changes, and subscribers are called with the new list.
    """

    def __init__(self, store: NoteStore, search_text: str = '', sort_by_due_date: bool = False):
        """
        Creates the projection and subscribes to the store.

        :param store: the note store to project.
        :param search_text: the initial search text.
        :param sort_by_due_date: the initial sort mode.
        """
        self.store: NoteStore = store
        self.search_text: str = search_text
        self.sort_by_due_date: bool = sort_by_due_date
        self.notes: List[Note] = []
        self._subscribers: List[Callable[[List[Note]], None]] = []
        self._unsubscribe_store = store.subscribe(self._store_changed)
        self._recompute(store.snapshot())

    def set_search_text(self, search_text: str) -> None:
        if search_text == self.search_text:
            return
        self.search_text = search_text
        self._recompute(self.store.snapshot())

    def set_sort_by_due_date(self, sort_by_due_date: bool) -> None:
        if sort_by_due_date == self.sort_by_due_date:
            return
        self.sort_by_due_date = sort_by_due_date
        self._recompute(self.store.snapshot())

    def subscribe(self, cb: Callable[[List[Note]], None]) -> Callable[[], None]:
        """
        Registers a function which is called with the new list every time it is recomputed.

        :param cb: the function to call.
        :return: a function which removes the subscription.
        """
        self._subscribers.append(cb)

        def unsubscribe():
            if cb in self._subscribers:
                self._subscribers.remove(cb)

        return unsubscribe

    def close(self) -> None:
        """
        Stops following the store.
        """
        self._unsubscribe_store()
        self._subscribers.clear()

    def _store_changed(self, snapshot: tuple[Note, ...]) -> None:
        self._recompute(snapshot)

    def _recompute(self, snapshot: tuple[Note, ...]) -> None:
        self.notes = project(snapshot, self.search_text, self.sort_by_due_date)
        for cb in list(self._subscribers):
            cb(list(self.notes))
