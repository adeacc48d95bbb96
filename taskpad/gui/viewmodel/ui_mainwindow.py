from PyQt6 import QtCore, QtGui, QtWidgets


class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        MainWindow.setObjectName("MainWindow")
        MainWindow.resize(960, 640)
        self.centralwidget = QtWidgets.QWidget(parent=MainWindow)
        self.centralwidget.setObjectName("centralwidget")
        self.verticalLayout = QtWidgets.QVBoxLayout(self.centralwidget)
        self.verticalLayout.setObjectName("verticalLayout")

        self.lyt_header = QtWidgets.QHBoxLayout()
        self.lyt_header.setObjectName("lyt_header")
        self.lbl_title = QtWidgets.QLabel(parent=self.centralwidget)
        self.lbl_title.setObjectName("lbl_title")
        self.lyt_header.addWidget(self.lbl_title)
        spacer = QtWidgets.QSpacerItem(40, 20, QtWidgets.QSizePolicy.Policy.Expanding,
                                       QtWidgets.QSizePolicy.Policy.Minimum)
        self.lyt_header.addItem(spacer)
        self.btn_add_note = QtWidgets.QPushButton(parent=self.centralwidget)
        self.btn_add_note.setObjectName("btn_add_note")
        self.lyt_header.addWidget(self.btn_add_note)
        self.verticalLayout.addLayout(self.lyt_header)

        self.txt_search = QtWidgets.QLineEdit(parent=self.centralwidget)
        self.txt_search.setClearButtonEnabled(True)
        self.txt_search.setObjectName("txt_search")
        self.verticalLayout.addWidget(self.txt_search)

        self.lyt_sort = QtWidgets.QHBoxLayout()
        self.lyt_sort.setObjectName("lyt_sort")
        self.lbl_sort = QtWidgets.QLabel(parent=self.centralwidget)
        self.lbl_sort.setObjectName("lbl_sort")
        self.lyt_sort.addWidget(self.lbl_sort)
        self.cb_sort_due_date = QtWidgets.QCheckBox(parent=self.centralwidget)
        self.cb_sort_due_date.setObjectName("cb_sort_due_date")
        self.lyt_sort.addWidget(self.cb_sort_due_date)
        self.lbl_sort_mode = QtWidgets.QLabel(parent=self.centralwidget)
        self.lbl_sort_mode.setObjectName("lbl_sort_mode")
        self.lyt_sort.addWidget(self.lbl_sort_mode)
        self.lyt_sort.addStretch(1)
        self.verticalLayout.addLayout(self.lyt_sort)

        self.splitter = QtWidgets.QSplitter(parent=self.centralwidget)
        self.splitter.setOrientation(QtCore.Qt.Orientation.Horizontal)
        self.splitter.setObjectName("splitter")
        self.tbl_notes = QtWidgets.QTableWidget(parent=self.splitter)
        self.tbl_notes.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.tbl_notes.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows)
        self.tbl_notes.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.tbl_notes.verticalHeader().setVisible(False)
        self.tbl_notes.setObjectName("tbl_notes")
        self.txt_preview = QtWidgets.QTextBrowser(parent=self.splitter)
        self.txt_preview.setOpenExternalLinks(True)
        self.txt_preview.setObjectName("txt_preview")
        self.verticalLayout.addWidget(self.splitter, 3)

        self.lyt_log = QtWidgets.QHBoxLayout()
        self.lyt_log.setObjectName("lyt_log")
        self.lbl_log = QtWidgets.QLabel(parent=self.centralwidget)
        self.lbl_log.setObjectName("lbl_log")
        self.lyt_log.addWidget(self.lbl_log)
        self.lyt_log.addStretch(1)
        self.btn_clear_logs = QtWidgets.QToolButton(parent=self.centralwidget)
        self.btn_clear_logs.setObjectName("btn_clear_logs")
        self.lyt_log.addWidget(self.btn_clear_logs)
        self.verticalLayout.addLayout(self.lyt_log)
        self.txt_log_display = QtWidgets.QTextEdit(parent=self.centralwidget)
        self.txt_log_display.setReadOnly(True)
        self.txt_log_display.setObjectName("txt_log_display")
        self.verticalLayout.addWidget(self.txt_log_display, 1)
        MainWindow.setCentralWidget(self.centralwidget)

        self.menubar = QtWidgets.QMenuBar(parent=MainWindow)
        self.menubar.setObjectName("menubar")
        self.menuFile = QtWidgets.QMenu(parent=self.menubar)
        self.menuFile.setObjectName("menuFile")
        MainWindow.setMenuBar(self.menubar)
        self.statusbar = QtWidgets.QStatusBar(parent=MainWindow)
        self.statusbar.setObjectName("statusbar")
        MainWindow.setStatusBar(self.statusbar)
        self.actionAdd_Note = QtGui.QAction(parent=MainWindow)
        self.actionAdd_Note.setObjectName("actionAdd_Note")
        self.actionQuit_TaskPad = QtGui.QAction(parent=MainWindow)
        self.actionQuit_TaskPad.setObjectName("actionQuit_TaskPad")
        self.menuFile.addAction(self.actionAdd_Note)
        self.menuFile.addSeparator()
        self.menuFile.addAction(self.actionQuit_TaskPad)
        self.menubar.addAction(self.menuFile.menuAction())

        self.retranslateUi(MainWindow)
        QtCore.QMetaObject.connectSlotsByName(MainWindow)

    def retranslateUi(self, MainWindow):
        _translate = QtCore.QCoreApplication.translate
        MainWindow.setWindowTitle(_translate("MainWindow", "TaskPad"))
        self.lbl_title.setText(_translate("MainWindow", "<b>Notes &amp; Tasks</b>"))
        self.btn_add_note.setText(_translate("MainWindow", "Add Note"))
        self.btn_add_note.setToolTip(_translate("MainWindow", "Add a note"))
        self.txt_search.setPlaceholderText(_translate("MainWindow", "Search..."))
        self.lbl_sort.setText(_translate("MainWindow", "Sort by:"))
        self.lbl_sort_mode.setText(_translate("MainWindow", "Title"))
        self.lbl_log.setText(_translate("MainWindow", "Log"))
        self.btn_clear_logs.setText(_translate("MainWindow", "Clear"))
        self.menuFile.setTitle(_translate("MainWindow", "File"))
        self.actionAdd_Note.setText(_translate("MainWindow", "Add Note"))
        self.actionAdd_Note.setShortcut(_translate("MainWindow", "Ctrl+N"))
        self.actionQuit_TaskPad.setText(_translate("MainWindow", "Quit TaskPad"))
        self.actionQuit_TaskPad.setShortcut(_translate("MainWindow", "Ctrl+Q"))
