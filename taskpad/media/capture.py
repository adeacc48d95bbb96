"""
Contains the media acquisition collaborators: the camera capture and gallery pick interfaces, the ``MediaResult``
returned to the note workflows, and ``CommandCaptureProvider`` which captures images with an external command.
"""

from __future__ import annotations

import logging
import shlex
import shutil
from pathlib import Path
from subprocess import Popen, PIPE, TimeoutExpired
from typing import List

from taskpad.media.fileprovider import FileProvider, create_image_file
from taskpad.notes.model.note import Attachment

#: Mime filter used when picking from the gallery.
IMAGE_MIME_FILTER = 'image/*'


class CaptureError(Exception):
    """
    Base class for capture failures.
    """


class CaptureCancelled(CaptureError):
    """
    Raised when the capture handler finished without producing an image.
    """


class CaptureUnavailable(CaptureError):
    """
    Raised when no capture handler exists on this machine.
    """


class CaptureFailed(CaptureError):
    """
    Raised when the capture handler reported an error or did not finish in time.
    """


class MediaResult:
    """
    The outcome of a capture or gallery pick request.
    """

    #: an attachment was acquired.
    SUCCESS: int = 0
    #: the user cancelled; not an error.
    CANCELLED: int = 1
    #: no capture handler could be found.
    UNAVAILABLE: int = 2
    #: the request failed, e.g. the image file could not be created.
    FAILED: int = 3

    def __init__(self, status: int, attachment: Attachment | None = None, message: str = ''):
        """
        Creates a media result.

        :param status: one of ``SUCCESS``, ``CANCELLED``, ``UNAVAILABLE`` or ``FAILED``.
        :param attachment: the acquired attachment, for ``SUCCESS`` only.
        :param message: a message describing the outcome.
        """
        self.status: int = status
        self.attachment: Attachment | None = attachment
        self.message: str = message

    @property
    def ok(self) -> bool:
        return self.status == MediaResult.SUCCESS and self.attachment is not None

    def __repr__(self):
        return 'MediaResult(status={0}, attachment={1!r}, message={2!r})'.format(
            self.status, self.attachment, self.message)


class CaptureProvider:
    """
    Interface to a camera. Implementations block until the capture completes, so callers run them off the UI thread.
    """

    def is_available(self) -> bool:
        """
        :return: True if a capture handler exists on this machine.
        """
        return True

    def request_capture(self, destination: Path) -> str:
        """
        Captures an image into ``destination``.

        :param destination: the file the image must be written to.

        :raises CaptureCancelled: if no image was captured.
        :raises CaptureUnavailable: if no capture handler exists.
        :raises CaptureFailed: if the capture handler reported an error.

        :return: the locator of the captured image.
        """
        raise NotImplementedError


class GalleryProvider:
    """
    Interface to a gallery (file) picker.
    """

    def request_pick(self, mime_filter: str) -> str | None:
        """
        Asks the user to pick a file.

        :param mime_filter: the kind of files to offer, e.g. ``image/*``.

        :return: the locator of the picked file, or None if the user cancelled.
        """
        raise NotImplementedError


class CommandCaptureProvider(CaptureProvider):
    """
    Captures images by running an external command such as ``imagesnap`` (macOS) or ``fswebcam`` (Linux). The
    command's arguments may contain ``{path}``, which is replaced by the destination file.
    """

    DEFAULT_COMMANDS: List[str] = [
        'imagesnap -q -w 1 {path}',
        'fswebcam --no-banner -q {path}',
    ]
    #: Seconds to wait for the capture command before it is killed.
    TIMEOUT: int = 60

    def __init__(self, file_provider: FileProvider, command: str = ''):
        """
        Creates the provider.

        :param file_provider: brokers the locator returned for a captured file.
        :param command: a custom capture command. If empty, the first of :py:att:`DEFAULT_COMMANDS` found on the
        ``PATH`` is used.
        """
        self.file_provider: FileProvider = file_provider
        self.command: str = command

    def resolve_command(self) -> List[str] | None:
        """
        Finds the capture command to run.

        :return: the command as a list of arguments, or None if no capture command is installed.
        """
        candidates = [self.command] if self.command else CommandCaptureProvider.DEFAULT_COMMANDS
        for candidate in candidates:
            args = shlex.split(candidate)
            if args and shutil.which(args[0]) is not None:
                return args
        return None

    def is_available(self) -> bool:
        return self.resolve_command() is not None

    def request_capture(self, destination: Path) -> str:
        args = self.resolve_command()
        if args is None:
            raise CaptureUnavailable('No capture command found.')

        has_placeholder = any('{path}' in arg for arg in args)
        args = [arg.replace('{path}', str(destination)) for arg in args]
        if not has_placeholder:
            args.append(str(destination))
        logging.debug('Running capture command: {}'.format(' '.join(args)))
        p = Popen(args, stdout=PIPE, stderr=PIPE, universal_newlines=True)
        try:
            stdout, stderr = p.communicate(timeout=CommandCaptureProvider.TIMEOUT)
        except TimeoutExpired:
            p.kill()
            p.communicate()
            raise CaptureFailed('Capture command did not finish within {} seconds.'.format(
                CommandCaptureProvider.TIMEOUT))
        if p.returncode != 0:
            raise CaptureFailed('Capture command exited with {0}: {1}'.format(p.returncode, stderr.strip()))
        if not destination.exists() or destination.stat().st_size == 0:
            raise CaptureCancelled('Capture command did not write an image.')
        return self.file_provider.get_uri_for_file(destination)


def acquire_capture(provider: CaptureProvider, storage_dir: Path) -> MediaResult:
    """
    Requests a camera capture. The image is written to a new file in ``storage_dir``. Failures are logged and
    reported in the result; they never raise.

    :param provider: the camera.
    :param storage_dir: the app-private pictures folder.

    :return: the result of the capture.
    """
    if not provider.is_available():
        message = 'No camera capture handler is available.'
        logging.warning(message)
        return MediaResult(MediaResult.UNAVAILABLE, message=message)

    try:
        destination = create_image_file(storage_dir)
    except OSError as e:
        message = 'Error creating image file: {}'.format(e)
        logging.error(message)
        return MediaResult(MediaResult.FAILED, message=message)

    try:
        locator = provider.request_capture(destination)
    except CaptureUnavailable as e:
        destination.unlink(missing_ok=True)
        message = 'Capture unavailable: {}'.format(e)
        logging.warning(message)
        return MediaResult(MediaResult.UNAVAILABLE, message=message)
    except CaptureCancelled as e:
        destination.unlink(missing_ok=True)
        message = 'Capture cancelled: {}'.format(e)
        logging.debug(message)
        return MediaResult(MediaResult.CANCELLED, message=message)
    except (CaptureFailed, OSError) as e:
        destination.unlink(missing_ok=True)
        message = 'Capture failed: {}'.format(e)
        logging.error(message)
        return MediaResult(MediaResult.FAILED, message=message)

    logging.info('Captured image {}'.format(locator))
    return MediaResult(MediaResult.SUCCESS, Attachment.captured(locator), 'Captured image {}'.format(locator))


def acquire_pick(provider: GalleryProvider, mime_filter: str = IMAGE_MIME_FILTER) -> MediaResult:
    """
    Requests a gallery pick.

    :param provider: the gallery picker.
    :param mime_filter: the kind of files to offer.

    :return: the result of the pick. Cancelling the picker yields a ``CANCELLED`` result.
    """
    locator = provider.request_pick(mime_filter)
    if not locator:
        logging.debug('Gallery pick cancelled.')
        return MediaResult(MediaResult.CANCELLED, message='Gallery pick cancelled.')
    logging.info('Picked file {}'.format(locator))
    return MediaResult(MediaResult.SUCCESS, Attachment.from_gallery(locator), 'Picked file {}'.format(locator))
