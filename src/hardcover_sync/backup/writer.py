import json
import logging
import os
import shutil
import tempfile

logger = logging.getLogger(__name__)

DATA_FILENAME = "data.json"


class BackupWriter:
    """
    Owns a backup directory: every write replaces all of its contents with a single data.json.
    """

    def __init__(self, output_dir, filename=DATA_FILENAME):
        """
        :param output_dir: Directory receiving the backup. Created if absent.
        :param filename: Name of the JSON file written inside output_dir.
        """
        self.output_dir = os.fspath(output_dir)
        self.filename = filename
        self.filepath = os.path.join(self.output_dir, self.filename)

    @staticmethod
    def serialize(value):
        """Tab-indented JSON followed by a trailing newline."""
        return json.dumps(value, indent="\t", ensure_ascii=False) + "\n"

    def _prepare_dir(self):
        if os.path.exists(self.output_dir) and not os.path.isdir(self.output_dir):
            raise NotADirectoryError(f"Not a directory: {self.output_dir}")
        os.makedirs(self.output_dir, exist_ok=True)

    def _clear(self, keep=None):
        """Deletes every direct child of the output directory except `keep`."""
        with os.scandir(self.output_dir) as it:
            entries = list(it)

        for entry in entries:
            if keep is not None and entry.name == os.path.basename(keep):
                continue
            if entry.is_dir(follow_symlinks=False):
                shutil.rmtree(entry.path)
            else:
                os.remove(entry.path)
            logger.debug("Removed %s", entry.path)

    def write(self, value):
        """
        Replaces the directory contents with `value` serialized to data.json.

        The new file is written to a temporary file next to the old contents and
        renamed into place after everything else has been deleted. A failed write
        leaves the previous backup untouched.

        :param value: JSON-compatible value.
        :return: Path of the written file.
        """
        content = self.serialize(value)
        self._prepare_dir()

        fd, tmp_path = tempfile.mkstemp(prefix=f".{self.filename}.", suffix=".tmp", dir=self.output_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as file:
                file.write(content)
            self._clear(keep=tmp_path)
            os.replace(tmp_path, self.filepath)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.debug("Wrote %s", self.filepath)
        return self.filepath
