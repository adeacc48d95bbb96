"""
Contains the ``DialogGalleryProvider`` class.
"""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QStandardPaths
from PyQt6.QtWidgets import QFileDialog, QWidget

from taskpad.media.capture import GalleryProvider
from taskpad.notes.model.note import Attachment


class DialogGalleryProvider(GalleryProvider):
    """
    Picks files from the user's pictures folder with a file dialog. Picked files are returned as ``file://`` locators.
    """

    def __init__(self, parent: QWidget | None = None):
        """
        :param parent: the widget the file dialog is shown over.
        """
        self.parent: QWidget | None = parent

    def request_pick(self, mime_filter: str) -> str | None:
        start_dir = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.PicturesLocation)
        file_name, _ = QFileDialog.getOpenFileName(
            self.parent, 'Pick From Gallery', start_dir, Attachment.get_name_filter(mime_filter))
        if not file_name:
            return None
        return Path(file_name).resolve().as_uri()
