import dataclasses

import pytest

from taskpad.notes.model.note import Attachment, Note


class TestAttachment:
    CAPTURED_URI = 'content://taskpad.fileprovider/Pictures/JPEG_20240102_030405_abc123.jpg'

    def test_file_name(self):
        attachment = Attachment.captured(TestAttachment.CAPTURED_URI)
        assert attachment.file_name == 'JPEG_20240102_030405_abc123.jpg'

        attachment = Attachment.from_gallery('file:///home/user/My%20Pictures/holiday.PNG')
        assert attachment.file_name == 'holiday.PNG'

    def test_is_image(self):
        assert Attachment.captured(TestAttachment.CAPTURED_URI).is_image is True
        assert Attachment.from_gallery('file:///home/user/holiday.PNG').is_image is True
        assert Attachment.from_gallery('file:///home/user/report.pdf').is_image is False
        assert Attachment.from_gallery('content://media/external/42').is_image is False

    def test_captions(self):
        assert Attachment.captured(TestAttachment.CAPTURED_URI).caption == Attachment.CAPTION_CAPTURED
        assert Attachment.from_gallery('file:///tmp/a.png').caption == Attachment.CAPTION_GALLERY
        assert str(Attachment.from_gallery('file:///tmp/a.png')) == 'a.png (gallery file)'

    def test_get_name_filter(self):
        image_filter = Attachment.get_name_filter('image/*')
        assert image_filter.startswith('Images (')
        for ext in Attachment.get_supported_image_types():
            assert '*' + ext in image_filter

        assert Attachment.get_name_filter('image/jpeg') == 'Images (*.jpg *.jpeg)'
        assert Attachment.get_name_filter('image/png') == 'Images (*.png)'
        assert Attachment.get_name_filter('application/pdf') == 'All Files (*)'
        assert Attachment.get_name_filter('image/x-unknown') == 'All Files (*)'

    def test_attachment_is_immutable(self):
        attachment = Attachment.captured(TestAttachment.CAPTURED_URI)
        with pytest.raises(dataclasses.FrozenInstanceError):
            attachment.caption = 'changed'


class TestNote:

    def test_defaults(self):
        note = Note('Shopping', 'Milk and eggs')
        assert note.is_task is False
        assert note.due_date is None
        assert note.reminders == ()
        assert note.attachments == ()
        assert len(note.uuid) == 36
        assert str(note) == 'Shopping'

    def test_identical_notes_are_distinct(self):
        first = Note('Same', 'Same')
        second = Note('Same', 'Same')
        assert first.uuid != second.uuid
        assert first != second

    def test_lists_are_frozen(self):
        reminders = ['09:00']
        attachments = [Attachment.from_gallery('file:///tmp/a.png')]
        note = Note('Title', 'Description', reminders=reminders, attachments=attachments)
        reminders.append('10:00')
        attachments.clear()

        assert note.reminders == ('09:00',)
        assert len(note.attachments) == 1
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.title = 'Changed'

    def test_copy(self):
        note = Note('Pay rent', 'Before Friday', is_task=True, due_date='2024-02-01',
                    attachments=[Attachment.from_gallery('file:///tmp/receipt.png')])
        changed = note.copy(title='Pay the rent')

        assert changed.uuid == note.uuid
        assert changed.title == 'Pay the rent'
        assert changed.description == note.description
        assert changed.due_date == note.due_date
        assert changed.attachments == note.attachments
        assert note.title == 'Pay rent'
