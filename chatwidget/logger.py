# logger.py

import os, sys, json, logging
from typing import Any, Optional
from functools import partial

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        if logging_enabled:
            if log_file == "-":
                handler = logging.StreamHandler(sys.stdout)
            else:
                if not log_file:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'chat_debug.log')
                handler = logging.FileHandler(log_file, encoding='utf-8')
            handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)

    def write_json(self, data: Any) -> None:
        """Dump a structured snapshot at debug level."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(json.dumps(data, ensure_ascii=False, default=str))
