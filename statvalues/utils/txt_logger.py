from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union


LINE_FORMAT = "%(asctime)s > %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TxtLogger:
    """Append timestamped lines (``YYYY-MM-DD HH:MM:SS > message``) to a text file.

    The file is created, or truncated, on construction. Records go to a
    private logger that does not propagate, so the JSON stdout logging is
    unaffected.
    """

    def __init__(self, filename: Union[str, Path]) -> None:
        self.path = Path(filename)
        self._handler = logging.FileHandler(self.path, mode="w", encoding="utf-8")
        self._handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT))
        # Unregistered logger: one per file, never shared through the manager
        self._logger = logging.Logger(__name__, level=logging.INFO)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    def log(self, message: str) -> None:
        self._logger.info(message)
        self._handler.flush()

    def get_log(self) -> List[str]:
        with open(self.path, "r", encoding="utf-8") as fh:
            return fh.read().splitlines()

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()
