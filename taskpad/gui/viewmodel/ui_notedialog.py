from PyQt6 import QtCore, QtWidgets


class Ui_NoteDialog(object):
    def setupUi(self, NoteDialog):
        NoteDialog.setObjectName("NoteDialog")
        NoteDialog.resize(440, 520)
        self.verticalLayout = QtWidgets.QVBoxLayout(NoteDialog)
        self.verticalLayout.setObjectName("verticalLayout")

        self.frm_note = QtWidgets.QFormLayout()
        self.frm_note.setObjectName("frm_note")
        self.lbl_title = QtWidgets.QLabel(parent=NoteDialog)
        self.lbl_title.setObjectName("lbl_title")
        self.txt_title = QtWidgets.QLineEdit(parent=NoteDialog)
        self.txt_title.setObjectName("txt_title")
        self.frm_note.addRow(self.lbl_title, self.txt_title)
        self.lbl_description = QtWidgets.QLabel(parent=NoteDialog)
        self.lbl_description.setObjectName("lbl_description")
        self.txt_description = QtWidgets.QPlainTextEdit(parent=NoteDialog)
        self.txt_description.setObjectName("txt_description")
        self.frm_note.addRow(self.lbl_description, self.txt_description)
        self.cb_task = QtWidgets.QCheckBox(parent=NoteDialog)
        self.cb_task.setObjectName("cb_task")
        self.frm_note.addRow(self.cb_task)
        self.lbl_due_date = QtWidgets.QLabel(parent=NoteDialog)
        self.lbl_due_date.setObjectName("lbl_due_date")
        self.txt_due_date = QtWidgets.QLineEdit(parent=NoteDialog)
        self.txt_due_date.setObjectName("txt_due_date")
        self.frm_note.addRow(self.lbl_due_date, self.txt_due_date)
        self.verticalLayout.addLayout(self.frm_note)

        self.gb_media = QtWidgets.QGroupBox(parent=NoteDialog)
        self.gb_media.setObjectName("gb_media")
        self.lyt_media = QtWidgets.QVBoxLayout(self.gb_media)
        self.lyt_media.setObjectName("lyt_media")
        self.lyt_media_buttons = QtWidgets.QHBoxLayout()
        self.lyt_media_buttons.setObjectName("lyt_media_buttons")
        self.btn_capture = QtWidgets.QPushButton(parent=self.gb_media)
        self.btn_capture.setObjectName("btn_capture")
        self.lyt_media_buttons.addWidget(self.btn_capture)
        self.btn_gallery = QtWidgets.QPushButton(parent=self.gb_media)
        self.btn_gallery.setObjectName("btn_gallery")
        self.lyt_media_buttons.addWidget(self.btn_gallery)
        self.lyt_media.addLayout(self.lyt_media_buttons)
        self.lst_attachments = QtWidgets.QListWidget(parent=self.gb_media)
        self.lst_attachments.setObjectName("lst_attachments")
        self.lyt_media.addWidget(self.lst_attachments)
        self.verticalLayout.addWidget(self.gb_media)

        self.lbl_status = QtWidgets.QLabel(parent=NoteDialog)
        self.lbl_status.setWordWrap(True)
        self.lbl_status.setObjectName("lbl_status")
        self.verticalLayout.addWidget(self.lbl_status)

        self.lyt_buttons = QtWidgets.QHBoxLayout()
        self.lyt_buttons.setObjectName("lyt_buttons")
        self.btn_delete = QtWidgets.QPushButton(parent=NoteDialog)
        self.btn_delete.setObjectName("btn_delete")
        self.lyt_buttons.addWidget(self.btn_delete)
        self.lyt_buttons.addStretch(1)
        self.btn_cancel = QtWidgets.QPushButton(parent=NoteDialog)
        self.btn_cancel.setObjectName("btn_cancel")
        self.lyt_buttons.addWidget(self.btn_cancel)
        self.btn_confirm = QtWidgets.QPushButton(parent=NoteDialog)
        self.btn_confirm.setDefault(True)
        self.btn_confirm.setObjectName("btn_confirm")
        self.lyt_buttons.addWidget(self.btn_confirm)
        self.verticalLayout.addLayout(self.lyt_buttons)

        self.retranslateUi(NoteDialog)
        QtCore.QMetaObject.connectSlotsByName(NoteDialog)

    def retranslateUi(self, NoteDialog):
        _translate = QtCore.QCoreApplication.translate
        NoteDialog.setWindowTitle(_translate("NoteDialog", "Note"))
        self.lbl_title.setText(_translate("NoteDialog", "Title"))
        self.lbl_description.setText(_translate("NoteDialog", "Description"))
        self.cb_task.setText(_translate("NoteDialog", "Is it a task?"))
        self.lbl_due_date.setText(_translate("NoteDialog", "Due date"))
        self.txt_due_date.setPlaceholderText(_translate("NoteDialog", "YYYY-MM-DD"))
        self.gb_media.setTitle(_translate("NoteDialog", "Attachments"))
        self.btn_capture.setText(_translate("NoteDialog", "Capture Image"))
        self.btn_gallery.setText(_translate("NoteDialog", "Pick From Gallery"))
        self.btn_delete.setText(_translate("NoteDialog", "Delete"))
        self.btn_cancel.setText(_translate("NoteDialog", "Cancel"))
        self.btn_confirm.setText(_translate("NoteDialog", "Add"))
