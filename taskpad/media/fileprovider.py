"""
Creates the files which captured images are written to, and brokers opaque locators for them so that a capture
handler never needs a raw file system path from the note model.
"""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from urllib.parse import quote, unquote, urlparse

from taskpad.helpers import DateUtil

#: Scheme used for brokered locators.
CONTENT_SCHEME = 'content'


def create_image_file(storage_dir: Path, now: datetime | None = None) -> Path:
    """
    Creates an empty, uniquely named JPEG file in ``storage_dir``. The name follows the pattern
    ``JPEG_<yyyyMMdd_HHmmss>_<random>.jpg``.

    :param storage_dir: the app-private pictures folder.
    :param now: the time used for the timestamp. Defaults to now.

    :raises OSError: if the folder or the file cannot be created.

    :return: path to the created file.
    """
    time_stamp = DateUtil.convert('', now or datetime.now(), DateUtil.IMAGE_TIMESTAMP)
    storage_dir.mkdir(parents=True, exist_ok=True)
    fd, path = tempfile.mkstemp(prefix='JPEG_{}_'.format(time_stamp), suffix='.jpg', dir=storage_dir)
    os.close(fd)
    return Path(path)


class FileProvider:
    """
    Maps files under a root folder to ``content://<authority>/<root name>/<file name>`` locators and back.
    """

    def __init__(self, authority: str, root: Path):
        """
        Creates a file provider.

        :param authority: the authority part of generated locators, e.g. ``taskpad.fileprovider``.
        :param root: the folder whose files this provider may expose.
        """
        self.authority: str = authority
        self.root: Path = Path(root)

    def get_uri_for_file(self, file: Path) -> str:
        """
        Get the locator for a file.

        :param file: a file inside the provider's root folder.

        :raises ValueError: if the file is outside the root folder.

        :return: the opaque locator for the file.
        """
        relative = Path(file).resolve().relative_to(self.root.resolve())
        return '{0}://{1}/{2}/{3}'.format(CONTENT_SCHEME, self.authority, quote(self.root.name),
                                          quote(relative.as_posix()))

    def get_file_for_uri(self, uri: str) -> Path:
        """
        Resolves a locator created by :py:meth:`get_uri_for_file`.

        :param uri: the locator.

        :raises ValueError: if the locator was not issued by this provider.

        :return: path to the file.
        """
        parsed = urlparse(uri)
        if parsed.scheme != CONTENT_SCHEME or parsed.netloc != self.authority:
            raise ValueError('Locator {} was not issued by {}'.format(uri, self.authority))
        root_name, _, relative = unquote(parsed.path).lstrip('/').partition('/')
        if root_name != self.root.name or relative == '':
            raise ValueError('Locator {} does not name a file under {}'.format(uri, self.root))
        file = (self.root / relative).resolve()
        if not file.is_relative_to(self.root.resolve()):
            raise ValueError('Locator {} points outside {}'.format(uri, self.root))
        return file

    def owns(self, uri: str) -> bool:
        """
        Checks whether a locator was issued by this provider.

        :param uri: the locator.
        :return: True if this provider can resolve the locator.
        """
        try:
            self.get_file_for_uri(uri)
        except ValueError:
            return False
        return True
