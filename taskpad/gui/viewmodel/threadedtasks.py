"""
Contains classes which are run in a separate thread.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import List

from PyQt6.QtCore import QThread, pyqtSignal

from taskpad import helpers
from taskpad.media.capture import CaptureProvider, MediaResult, acquire_capture

#: Logging levels which can be chosen in settings.
LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL
}


# noinspection PyUnresolvedReferences
class LoggingThread(QThread):
    """
    Used to collect logs and forward them to the log pane of the main window.
    """

    #: Log messages are emitted to this signal.
    log_signal = pyqtSignal(str)

    def __init__(self, logging_level: str, log_stdout: bool = False, log_file: bool = True, log_gui: bool = True):
        """
        Initialises the logging thread.

        :param logging_level: the logging level which can be `debug`, `info`, `warning`, `error` or `critical`.
        :param log_stdout: if True, logs are sent to standard out.
        :param log_file: if True, logs are sent to a timestamped file in the TaskPad log folder.
        :param log_gui: if True, logs are emitted on :py:att:`log_signal`.
        """
        super().__init__()
        self.logging_level: str = logging_level if logging_level in LOG_LEVELS else 'info'
        self.log_stdout: bool = log_stdout
        self.log_file: bool = log_file
        self.log_gui: bool = log_gui
        self.logger: logging.Logger = logging.getLogger()
        self.handlers: List[logging.Handler] = []
        #: When set, causes this thread to stop.
        self.stop_logging = threading.Event()
        self.setup_logging()

    def setup_logging(self) -> None:
        """
        Sets up the logging system as configured in the constructor.
        """
        log_format = '%(asctime)s %(levelname)s: %(message)s'
        logging.basicConfig(level=LOG_LEVELS[self.logging_level], format=log_format)
        self.logger.setLevel(LOG_LEVELS[self.logging_level])

        if self.log_file:
            log_file: Path = helpers.log_folder() / (datetime.now().strftime("TaskPad_%Y%m%d-%H%M%S") + '.log')
            self.handlers.append(logging.FileHandler(log_file))
        if self.log_stdout:
            self.handlers.append(logging.StreamHandler(sys.stdout))
        if self.log_gui:
            self.handlers.append(helpers.FunctionHandler(lambda msg: self.log_signal.emit(msg)))

        for handler in self.handlers:
            handler.setFormatter(logging.Formatter(log_format))
            self.logger.addHandler(handler)

    def set_logging_level(self, logging_level: str) -> None:
        """
        Changes the logging level.

        :param logging_level: the desired logging level.
        """
        if logging_level not in LOG_LEVELS:
            logging.warning('Unknown logging level {}, keeping {}.'.format(logging_level, self.logging_level))
            return
        self.logging_level = logging_level
        self.logger.setLevel(LOG_LEVELS[logging_level])

    def teardown_logging(self) -> None:
        """
        Removes the handlers added by this thread and stops it.
        """
        self.stop_logging.set()
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def run(self) -> None:
        """
        Keeps the logging thread running until it is stopped.
        """
        while not self.stop_logging.is_set():
            time.sleep(1)


# noinspection PyUnresolvedReferences
class CaptureTask(QThread):
    """
    Runs a camera capture without blocking the GUI. The outcome is emitted on :py:att:`result_signal`, which Qt
    delivers on the GUI thread, so completions are handled in the order they finish.
    """

    #: The ``MediaResult`` of the capture is sent to this signal.
    result_signal = pyqtSignal(object)

    def __init__(self, provider: CaptureProvider, storage_dir: Path):
        """
        Initialises the capture.

        :param provider: the camera.
        :param storage_dir: the folder where the captured image file is created.
        """
        super().__init__()
        self.provider: CaptureProvider = provider
        self.storage_dir: Path = storage_dir

    def run(self) -> None:
        """
        Carries out the capture. This never raises; failures are reported as a ``MediaResult``.
        """
        result: MediaResult = acquire_capture(self.provider, self.storage_dir)
        self.result_signal.emit(result)
