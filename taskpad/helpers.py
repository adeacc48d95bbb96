"""
This is a helper file shared by the note model, the media collaborators and the GUI.
"""

from __future__ import annotations

import json
import logging
import re
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable

import markdown2

DATA_LOCATION: Path = Path.home() / ".taskpad"  #: Location where application data (captured pictures, logs) is stored.


def get_uuid() -> str:
    """
    Generates a UUID.

    :return: a UUID.
    """
    return str(uuid.uuid4())


def is_blank(text: str | None) -> bool:
    """
    Checks whether a form field is empty or contains only whitespace.

    :param text: the text to check.

    :return: True if the text is ``None``, empty or whitespace-only.
    """
    return text is None or text.strip() == ''


def markdown_to_html(text: str) -> str:
    """
    Converts Markdown to HTML using the `markdown2 <https://pypi.org/project/markdown2/>`_ library.

    :param text: the Markdown text to convert to HTMl.

    :return: the HTML version of the Markdown given.
    """
    html = markdown2.markdown(text, extras={
        'breaks': {'on_newline': True, 'on_backslash': True},
        'cuddled-lists': None
    })
    build = ''
    for line in html.split('\n'):
        build += '<br>' if re.match(r'^\s*$', line) else line
        build += '\n'
    return build


def settings_folder() -> Path:
    """
    Get the location of the Application Data folder for TaskPad

    :return: path to the Application Data folder.
    """
    folder = DATA_LOCATION
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def pictures_folder() -> Path:
    """
    Get the location of the app-private ``Pictures`` folder, where captured images are written.

    :return: path to the ``Pictures`` folder.
    """
    folder = DATA_LOCATION / 'Pictures'
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def log_folder() -> Path:
    """
    Get the location of the ``Logs`` folder.

    :return: path to the ``Logs`` folder.
    """
    folder = DATA_LOCATION / 'Logs'
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def merge_settings(defaults: dict, conf_file: Path) -> dict:
    """
    Overrides the default settings with any settings found in a configuration file. Keys which are not in ``defaults``
    are ignored. If the file does not exist or cannot be parsed, the defaults are returned unchanged.

    :param defaults: the default settings.
    :param conf_file: path to a JSON configuration file.

    :return: a new dictionary with the merged settings.
    """
    settings = dict(defaults)
    if not conf_file.exists():
        return settings

    try:
        with open(conf_file, encoding='utf-8') as fp:
            loaded_settings = json.load(fp)
    except json.decoder.JSONDecodeError:
        logging.critical("Your configuration file at {} is invalid. Please check syntax.".format(conf_file))
        return settings
    except (OSError, UnicodeDecodeError) as e:
        logging.critical("Your configuration file at {0} could not be read: {1}".format(conf_file, e))
        return settings

    if not isinstance(loaded_settings, dict):
        logging.critical("Your configuration file at {} does not contain an object.".format(conf_file))
        return settings

    for key in defaults.keys():
        if key in loaded_settings:
            settings[key] = loaded_settings[key]
    return settings


class DateUtil:
    """
    Utility class for converting between the date and date/time formats used by TaskPad.
    """

    DUE_DATE = "%Y-%m-%d"
    IMAGE_TIMESTAMP = "%Y%m%d_%H%M%S"

    @staticmethod
    def convert(source_format: str,
                obj: str | datetime,
                required_format: str = '') -> str | datetime | bool:
        """
        Convert one date/datetime format to another.

        :param source_format: the format of the source date/datetime. Can be left empty if ``obj`` is a :py:class:`datetime`
        object.
        :param obj: what to convert from. Can either be a string, or a :py:class:`datetime` object.
        :param required_format: the format required if the required output is of type :py:class:`str`.

        """
        if isinstance(obj, str):
            try:
                obj = datetime.strptime(obj, source_format)
            except ValueError:
                return False
        if required_format == '':
            return obj
        else:
            try:
                return obj.strftime(required_format)
            except ValueError:
                print('Could not convert date to specified format {}'.format(required_format), file=sys.stderr)
                return False

    @staticmethod
    def is_overdue(due_date: str | None, today: datetime | None = None) -> bool:
        """
        Checks whether a due date lies in the past. Due dates which are not in ``DUE_DATE`` format are never overdue.

        :param due_date: the due date of a task.
        :param today: the reference date. Defaults to now.

        :return: True if the due date is before today.
        """
        if not due_date:
            return False
        due = DateUtil.convert(DateUtil.DUE_DATE, due_date.strip())
        if due is False:
            return False
        today = today or datetime.now()
        return due.date() < today.date()


class FunctionHandler(logging.Handler):
    def __init__(self, func: Callable):
        logging.Handler.__init__(self)
        self.func = func

    def emit(self, record):
        msg = self.format(record)
        self.func(msg)
