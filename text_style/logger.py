import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # Handlers are attached once per logger name, like logging.basicConfig
        if not self._logger.handlers:
            self._configure(logging_enabled, log_file)

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _configure(self, logging_enabled: bool, log_file: Optional[str]) -> None:
        if not logging_enabled:
            self._logger.addHandler(logging.NullHandler())
            return
        if log_file == "-":
            handler = logging.StreamHandler(sys.stdout)
        else:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                log_file = os.path.join(project_root, 'logs', 'text_style_debug.log')
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
            handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        self._logger.addHandler(handler)
        self._logger.setLevel(logging.DEBUG)

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
