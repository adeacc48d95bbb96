"""
This is the media package of TaskPad. Here, you'll find the following:

- ``capture.py`` - Contains the camera and gallery collaborator interfaces, ``MediaResult``, and the
  ``CommandCaptureProvider`` which captures images with an external command.
- ``fileprovider.py`` - Creates captured image files and brokers locators for them.

"""

from . import capture, fileprovider

__all__ = ['capture', 'fileprovider', ]
