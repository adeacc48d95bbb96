import pytest
from decouple import config

from taskpad.notes.model.note import Attachment
from taskpad.notes.model.workflow import NoteComposer

TEST_ENV = config('TEST_ENV', default='remote')


@pytest.mark.skipif(TEST_ENV != 'local', reason="Requires a display")
class TestNoteDialog:
    APP = None

    @classmethod
    def setup_class(cls):
        from PyQt6.QtWidgets import QApplication
        TestNoteDialog.APP = QApplication.instance() or QApplication([])

    @staticmethod
    def make_dialog(mode: str):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        return NoteDialog(mode)

    def test_add_mode(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_ADD)
        assert dialog.btn_confirm.text() == 'Add'
        assert dialog.btn_delete.isHidden() is True
        assert dialog.btn_capture.isHidden() is False
        assert dialog.txt_due_date.isHidden() is True

    def test_edit_mode(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_EDIT)
        dialog.load('Pay rent', 'Landlord', True, '2024-02-01')
        assert dialog.btn_confirm.text() == 'Save'
        assert dialog.btn_capture.isHidden() is True
        assert dialog.txt_due_date.isHidden() is False
        assert dialog.txt_due_date.text() == '2024-02-01'

    def test_validate_form(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_ADD)
        assert dialog.btn_confirm.isEnabled() is False

        dialog.txt_title.setText('Shopping')
        assert dialog.btn_confirm.isEnabled() is False

        dialog.txt_description.setPlainText('   ')
        assert dialog.btn_confirm.isEnabled() is False

        dialog.txt_description.setPlainText('Milk')
        assert dialog.btn_confirm.isEnabled() is True

    def test_apply_to(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_ADD)
        dialog.txt_title.setText('Shopping')
        dialog.txt_description.setPlainText('Milk')
        dialog.cb_task.setChecked(True)
        dialog.txt_due_date.setText(' 2024-02-01 ')

        composer = NoteComposer()
        composer.begin()
        dialog.apply_to(composer)
        assert composer.title == 'Shopping'
        assert composer.description == 'Milk'
        assert composer.is_task is True
        assert composer.due_date == '2024-02-01'

    def test_show_attachments(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_ADD)
        dialog.show_attachments([Attachment.captured('content://taskpad.fileprovider/Pictures/1.jpg'),
                                 Attachment.from_gallery('file:///tmp/2.png')])
        assert dialog.lst_attachments.count() == 2
        assert dialog.lst_attachments.item(0).text() == '1.jpg (captured image)'

    def test_signals(self):
        from taskpad.gui.viewmodel.notedialog import NoteDialog
        dialog = TestNoteDialog.make_dialog(NoteDialog.MODE_ADD)
        fired = []
        dialog.capture_requested.connect(lambda: fired.append('capture'))
        dialog.gallery_requested.connect(lambda: fired.append('gallery'))
        dialog.btn_capture.click()
        dialog.btn_gallery.click()
        assert fired == ['capture', 'gallery']
