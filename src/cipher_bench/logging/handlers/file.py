import os

from cipher_bench.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """Appends log lines to a file that stays open for the whole run.

    Missing parent directories are created. Lines already in the file are
    kept, so repeated runs accumulate in one log.

    Args:
        filepath (str): File to append to.

    Raises:
        ValueError: If ``filepath`` is empty or names a directory.
        OSError: If the file cannot be opened for appending.
    """

    def __init__(self, filepath: str) -> None:
        if not filepath or os.path.isdir(filepath):
            raise ValueError(f"Invalid log file; expected a file path but got {filepath!r}")

        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.filepath = filepath
        self._file = open(filepath, "a", encoding="utf-8")

    def push(self, buffer) -> None:
        if self._file.closed:
            return
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()
