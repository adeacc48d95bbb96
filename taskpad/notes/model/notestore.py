"""
Contains the ``NoteStore`` class, the in-memory collection which owns every note for the lifetime of the process.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List

from taskpad import helpers
from taskpad.notes.model.note import Note


class NoteStore:
    """
    An ordered collection of notes. Notes are keyed by their ``uuid`` and insertion order is the display order.

    Every mutation which changes the store produces a new immutable snapshot (a tuple of notes) which is passed to each
    subscriber. Subscribers must never mutate the store from within a notification.
    """

    def __init__(self):
        self._notes: Dict[str, Note] = {}
        self._order: List[str] = []
        self._subscribers: List[Callable[[tuple[Note, ...]], None]] = []

    @staticmethod
    def _key(target: Note | str) -> str:
        return target.uuid if isinstance(target, Note) else target

    def add(self, note: Note) -> None:
        """
        Appends a note to the end of the store.

        :param note: the note to add. If a note with the same ``uuid`` is already stored, the note is added under a fresh
        ``uuid``.
        """
        if note.uuid in self._notes:
            logging.debug('Note {} is already stored, adding it as a new note.'.format(note.uuid))
            note = note.copy(uuid=helpers.get_uuid())
        self._notes[note.uuid] = note
        self._order.append(note.uuid)
        logging.debug('Added note {0} ({1}).'.format(note.uuid, note.title))
        self._notify()

    def update(self, target: Note | str, new_value: Note) -> bool:
        """
        Replaces a note, keeping its position.

        :param target: the note to replace, or its ``uuid``.
        :param new_value: the replacement. It is stored under the target's ``uuid``.

        :return: True if the note was replaced, False if the target is not in the store.
        """
        key = NoteStore._key(target)
        if key not in self._notes:
            logging.warning('Cannot update note {}: it is no longer in the store.'.format(key))
            return False
        if new_value.uuid != key:
            new_value = new_value.copy(uuid=key)
        self._notes[key] = new_value
        logging.debug('Updated note {0} ({1}).'.format(key, new_value.title))
        self._notify()
        return True

    def remove(self, target: Note | str) -> bool:
        """
        Removes a note.

        :param target: the note to remove, or its ``uuid``.

        :return: True if the note was removed, False if the target is not in the store.
        """
        key = NoteStore._key(target)
        if key not in self._notes:
            logging.warning('Cannot remove note {}: it is no longer in the store.'.format(key))
            return False
        del self._notes[key]
        self._order.remove(key)
        logging.debug('Removed note {}.'.format(key))
        self._notify()
        return True

    def clear(self) -> None:
        """
        Removes all notes.
        """
        if not self._order:
            return
        self._notes.clear()
        self._order.clear()
        self._notify()

    def get(self, uuid: str) -> Note | None:
        """
        Get a note by its ``uuid``.

        :param uuid: the ``uuid`` of the note.
        :return: the note, or None if it is not in the store.
        """
        return self._notes.get(uuid)

    def index_of(self, target: Note | str) -> int:
        """
        Get the position of a note.

        :param target: the note, or its ``uuid``.
        :return: the position of the note, or -1 if it is not in the store.
        """
        key = NoteStore._key(target)
        return self._order.index(key) if key in self._notes else -1

    def snapshot(self) -> tuple[Note, ...]:
        """
        Get the notes in display order.

        :return: an immutable snapshot of the store.
        """
        return tuple(self._notes[key] for key in self._order)

    def subscribe(self, cb: Callable[[tuple[Note, ...]], None]) -> Callable[[], None]:
        """
        Registers a function which is called with a new snapshot after every change to the store.

        :param cb: the function to call.
        :return: a function which removes the subscription.
        """
        self._subscribers.append(cb)

        def unsubscribe():
            if cb in self._subscribers:
                self._subscribers.remove(cb)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for cb in list(self._subscribers):
            cb(snapshot)

    def __len__(self):
        return len(self._order)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.snapshot())

    def __contains__(self, target: Note | str) -> bool:
        return NoteStore._key(target) in self._notes
