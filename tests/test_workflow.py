from taskpad.media.capture import MediaResult
from taskpad.notes.model import workflow
from taskpad.notes.model.note import Attachment, Note
from taskpad.notes.model.notestore import NoteStore
from taskpad.notes.model.workflow import NoteComposer, NoteEditor


class TestValidateFields:

    def test_validate_fields(self):
        assert workflow.validate_fields('Title', 'Description') == (True, '')
        assert workflow.validate_fields('', 'x') == (False, 'The title is missing.')
        assert workflow.validate_fields('x', '   ') == (False, 'The description is missing.')
        assert workflow.validate_fields(' \t', '\n') == (False, 'The title and description are missing.')


class TestNoteComposer:
    PICTURE = Attachment.captured('content://taskpad.fileprovider/Pictures/JPEG_1.jpg')
    GALLERY = Attachment.from_gallery('file:///home/user/Pictures/cat.png')

    @staticmethod
    def composing() -> NoteComposer:
        composer = NoteComposer()
        composer.begin()
        return composer

    def test_commit_rejects_blank(self):
        store = NoteStore()
        composer = TestNoteComposer.composing()
        composer.title = ''
        composer.description = 'x'

        success, data = composer.commit(store)
        assert success is False
        assert data == 'The title is missing.'
        assert len(store) == 0
        assert composer.is_composing is True

    def test_commit(self):
        store = NoteStore()
        composer = TestNoteComposer.composing()
        composer.title = 'x'
        composer.description = 'y'
        composer.attach(TestNoteComposer.PICTURE)
        composer.accept_media(MediaResult(MediaResult.SUCCESS, TestNoteComposer.GALLERY))

        success, data = composer.commit(store)
        assert success is True
        assert len(store) == 1
        note = store.snapshot()[0]
        assert note is composer.note
        assert note.title == 'x'
        assert note.description == 'y'
        assert note.attachments == (TestNoteComposer.PICTURE, TestNoteComposer.GALLERY)
        assert note.due_date is None
        assert composer.state == NoteComposer.COMMITTED

        # The buffer is emptied without touching the committed note
        assert composer.pending == []
        assert len(note.attachments) == 2

    def test_commit_task(self):
        store = NoteStore()
        composer = TestNoteComposer.composing()
        composer.title = 'Pay rent'
        composer.description = 'Landlord'
        composer.is_task = True
        composer.due_date = '2024-02-01'
        composer.commit(store)
        assert store.snapshot()[0].due_date == '2024-02-01'

        composer.begin()
        composer.title = 'Plain note'
        composer.description = 'Not a task'
        composer.due_date = '2024-02-01'
        composer.commit(store)
        assert store.snapshot()[1].due_date is None

    def test_commit_twice(self):
        store = NoteStore()
        composer = TestNoteComposer.composing()
        composer.title = 'x'
        composer.description = 'y'
        composer.commit(store)

        success, data = composer.commit(store)
        assert success is False
        assert len(store) == 1

    def test_pending_is_scoped_to_one_composer(self):
        store = NoteStore()
        first = TestNoteComposer.composing()
        first.attach(TestNoteComposer.PICTURE)
        first.cancel()
        assert first.pending == []
        assert first.state == NoteComposer.CANCELLED

        second = TestNoteComposer.composing()
        second.title = 'x'
        second.description = 'y'
        second.commit(store)
        assert store.snapshot()[0].attachments == ()

    def test_attach_when_not_composing(self):
        composer = NoteComposer()
        assert composer.attach(TestNoteComposer.PICTURE) is False
        assert composer.pending == []

        composer.begin()
        composer.cancel()
        assert composer.accept_media(MediaResult(MediaResult.SUCCESS, TestNoteComposer.PICTURE)) is False
        assert composer.pending == []

    def test_accept_media_ignores_failures(self):
        composer = TestNoteComposer.composing()
        assert composer.accept_media(MediaResult(MediaResult.CANCELLED)) is False
        assert composer.accept_media(MediaResult(MediaResult.UNAVAILABLE)) is False
        assert composer.accept_media(MediaResult(MediaResult.FAILED)) is False
        assert composer.pending == []

    def test_media_is_kept_in_arrival_order(self):
        composer = TestNoteComposer.composing()
        arrivals = [Attachment.captured('content://taskpad.fileprovider/Pictures/{}.jpg'.format(i)) for i in range(5)]
        for attachment in arrivals:
            composer.accept_media(MediaResult(MediaResult.SUCCESS, attachment))
        assert composer.pending == arrivals


class TestNoteEditor:
    ATTACHMENTS = (Attachment.captured('content://taskpad.fileprovider/Pictures/1.jpg'),
                   Attachment.from_gallery('file:///tmp/2.png'))

    @staticmethod
    def stored_note(store: NoteStore, **kwargs) -> Note:
        note = Note(kwargs.pop('title', 'Trip'), kwargs.pop('description', 'Photos'), **kwargs)
        store.add(note)
        return note

    def test_open(self):
        editor = NoteEditor()
        assert editor.state == NoteEditor.VIEWING
        note = Note('Task', 'No due date', is_task=True)
        editor.open(note)
        assert editor.is_editing is True
        assert editor.title == 'Task'
        assert editor.due_date == ''

    def test_save_preserves_attachments(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store, attachments=TestNoteEditor.ATTACHMENTS, reminders=['09:00'])
        editor = NoteEditor()
        editor.open(note)
        editor.title = 'Road trip'
        editor.description = 'All the photos'

        success, data = editor.save(store)
        assert success is True
        assert editor.state == NoteEditor.SAVED
        saved = store.get(note.uuid)
        assert saved.title == 'Road trip'
        assert saved.description == 'All the photos'
        assert saved.attachments == TestNoteEditor.ATTACHMENTS
        assert saved.reminders == ('09:00',)
        assert editor.selected == saved

    def test_save_keeps_position(self):
        store = NoteStore()
        store.add(Note('First', '1'))
        note = TestNoteEditor.stored_note(store)
        store.add(Note('Last', '3'))
        editor = NoteEditor()
        editor.open(note)
        editor.is_task = True
        editor.due_date = '2024-05-05'

        editor.save(store)
        assert store.index_of(note) == 1
        assert store.snapshot()[1] == note.copy(is_task=True, due_date='2024-05-05')

    def test_save_rejects_blank(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store)
        editor = NoteEditor()
        editor.open(note)
        editor.description = ' '

        success, data = editor.save(store)
        assert success is False
        assert data == 'The description is missing.'
        assert editor.is_editing is True
        assert store.get(note.uuid) == note

    def test_save_removed_note(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store)
        editor = NoteEditor()
        editor.open(note)
        store.remove(note)

        success, data = editor.save(store)
        assert success is False
        assert len(store) == 0
        assert editor.state == NoteEditor.CANCELLED
        assert editor.selected is None

    def test_save_clears_due_date_of_plain_note(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store, is_task=True, due_date='2024-01-01')
        editor = NoteEditor()
        editor.open(note)
        editor.is_task = False

        editor.save(store)
        assert store.get(note.uuid).due_date is None

    def test_delete(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store)
        store.add(Note('Other', 'Stays'))
        editor = NoteEditor()
        editor.open(note)

        success, data = editor.delete(store)
        assert success is True
        assert len(store) == 1
        assert editor.state == NoteEditor.VIEWING
        assert editor.selected is None

        # Deleting again is a no-op
        success, data = editor.delete(store)
        assert success is False
        assert len(store) == 1

    def test_delete_removed_note(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store)
        editor = NoteEditor()
        editor.open(note)
        store.remove(note)

        success, data = editor.delete(store)
        assert success is False
        assert len(store) == 0

    def test_cancel(self):
        store = NoteStore()
        note = TestNoteEditor.stored_note(store)
        editor = NoteEditor()
        editor.open(note)
        editor.title = 'Changed'
        editor.cancel()

        assert editor.state == NoteEditor.CANCELLED
        assert store.get(note.uuid).title == 'Trip'
        success, data = editor.save(store)
        assert success is False
