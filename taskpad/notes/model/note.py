"""
Contains the ``Note`` class, which represents a note or a task, and the ``Attachment`` class, which represents a media
item attached to a note.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urlparse

from taskpad import helpers


@dataclass(frozen=True)
class Attachment:
    """
    Represents a media item attached to a note. The ``uri`` is an opaque locator; TaskPad never reads the file behind
    it.
    """

    #: caption given to images captured with the camera.
    CAPTION_CAPTURED = "captured image"
    #: caption given to files picked from the gallery.
    CAPTION_GALLERY = "gallery file"

    _SUPPORTED_IMAGE_TYPES = ['.png', '.jpg', '.jpeg', '.gif', '.webp', '.apng',
                              '.avif', '.bmp', '.ico', '.tiff', '.svg']

    uri: str
    caption: str

    @property
    def file_name(self) -> str:
        """
        The last path segment of the locator.
        """
        return os.path.basename(urlparse(self.uri).path)

    @property
    def is_image(self) -> bool:
        """
        True if the locator names one of the supported image types.
        """
        f_ext = os.path.splitext(self.file_name)[1].lower()
        return f_ext in Attachment._SUPPORTED_IMAGE_TYPES

    @staticmethod
    def captured(uri: str) -> Attachment:
        """
        Creates an attachment for an image captured with the camera.

        :param uri: the locator of the captured image.
        :return: the attachment.
        """
        return Attachment(uri=uri, caption=Attachment.CAPTION_CAPTURED)

    @staticmethod
    def from_gallery(uri: str) -> Attachment:
        """
        Creates an attachment for a file picked from the gallery.

        :param uri: the locator of the picked file.
        :return: the attachment.
        """
        return Attachment(uri=uri, caption=Attachment.CAPTION_GALLERY)

    @staticmethod
    def get_supported_image_types() -> List[str]:
        """
        Get a list of supported image types.

        :return: a list of supported image types.
        """
        return Attachment._SUPPORTED_IMAGE_TYPES

    @staticmethod
    def get_name_filter(mime_filter: str) -> str:
        """
        Converts a mime filter such as ``image/*`` into a file dialog name filter.

        :param mime_filter: the mime filter requested by the gallery picker.
        :return: a name filter, e.g. ``Images (*.png *.jpg)``.
        """
        if mime_filter.startswith('image/'):
            subtype = mime_filter.split('/', 1)[1]
            if subtype == '*':
                extensions = Attachment._SUPPORTED_IMAGE_TYPES
            elif subtype == 'jpeg':
                extensions = ['.jpg', '.jpeg']
            else:
                extensions = [ext for ext in Attachment._SUPPORTED_IMAGE_TYPES if ext[1:] == subtype]
            if extensions:
                return 'Images ({})'.format(' '.join('*' + ext for ext in extensions))
        return 'All Files (*)'

    def __str__(self):
        return '{0} ({1})'.format(self.file_name, self.caption)


@dataclass(frozen=True)
class Note:
    """
    Represents a note. A note flagged with ``is_task`` is a task and may carry a due date. Notes are immutable; use
    :py:meth:`copy` to derive an edited note which keeps the same ``uuid``.
    """

    title: str
    description: str
    is_task: bool = False
    due_date: str | None = None
    reminders: tuple[str, ...] = ()
    attachments: tuple[Attachment, ...] = ()
    uuid: str = field(default_factory=helpers.get_uuid)

    def __post_init__(self):
        # Stored notes must not share mutable lists with callers.
        object.__setattr__(self, 'reminders', tuple(self.reminders))
        object.__setattr__(self, 'attachments', tuple(self.attachments))

    def copy(self, **changes) -> Note:
        """
        Returns a copy of this note with the given fields changed.

        :param changes: fields to change, e.g. ``title='New title'``.
        :return: the changed copy.
        """
        return dataclasses.replace(self, **changes)

    def __str__(self):
        return self.title
