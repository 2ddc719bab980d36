import numpy as np
from pathlib import Path
from csv import writer
from shutil import copyfile
from os import remove, makedirs
from os.path import exists
from collections.abc import Collection


class FilePrinter:
    """
    Handles writing rows to a csv file with buffering and safe-saving.
    It writes to a temporary file first and then replaces the original
    to prevent corruption during interruption.
    """
    def __init__(
            self,
            file_name: str,
            save_freq: int,
            header: Collection[str] = None,
            resume: bool = False,
            create_dir: bool = True
    ):
        self.file_name = str(file_name)
        self.temp_file_path = '-temp.'.join(self.file_name.rsplit('.', 1))
        self.save_freq = save_freq
        self.call_count = 0
        self.buffer = None

        if not resume or not exists(self.file_name):
            self._create_file(header, create_dir)

    def __call__(self, data_array: np.ndarray):
        """
        Adds data to the buffer and writes it out if the save frequency is met.
        """
        self.call_count += 1
        if self.buffer is None:
            self.buffer = np.atleast_2d(data_array)
        else:
            self.buffer = np.concatenate((self.buffer, np.atleast_2d(data_array)), axis=0)

        if self.call_count % self.save_freq == 0:
            self.flush()

    def flush(self):
        """
        Writes any buffered data to the file.
        """
        if self.buffer is not None:
            self._copy_and_replace()
            self.buffer = None

    def _print(self):
        with open(self.temp_file_path, 'a', newline='') as f:
            writer(f).writerows(self.buffer.tolist())

    def _copy_and_replace(self):
        """
        Copies the main file to a temp file, appends, and copies back.
        """
        try:
            if exists(self.file_name):
                copyfile(self.file_name, self.temp_file_path)
            self._print()
            copyfile(self.temp_file_path, self.file_name)
        finally:
            if exists(self.temp_file_path):
                remove(self.temp_file_path)

    def _create_file(self, header: Collection[str], create_dir: bool):
        p = Path(self.file_name)
        if create_dir and not exists(p.parent):
            makedirs(p.parent)

        with open(self.file_name, 'w', newline='') as f:
            if header is not None:
                writer(f).writerow(header)


class RefinementLogger:
    """
    Records the progress of concave refinement, one row per pass:
    [pass, inserted, skipped_edges, hull_size].

    Rows are always kept in memory. When `file_prefix` is given they are also
    written to '<file_prefix>-refinement.csv'.
    """
    header = ["pass", "inserted", "skipped_edges", "hull_size"]

    def __init__(
            self,
            file_prefix: str = None,
            save_freq: int = 1,
            resume: bool = False,
    ):
        self._rows = []
        if file_prefix is not None:
            self.printer = FilePrinter(
                file_name=f"{file_prefix}-refinement.csv",
                save_freq=save_freq,
                header=self.header,
                resume=resume,
                create_dir=True,
            )
        else:
            self.printer = None

    def log_pass(self, n_pass: int, inserted: int, skipped_edges: int, hull_size: int):
        row = [n_pass, inserted, skipped_edges, hull_size]
        self._rows.append(row)
        if self.printer is not None:
            self.printer(np.array(row, dtype=np.int64))

    @property
    def history(self) -> np.ndarray:
        """ (P, 4) array of logged passes """
        return np.array(self._rows, dtype=np.int64).reshape(-1, len(self.header))

    @property
    def total_inserted(self) -> int:
        return int(self.history[:, 1].sum())

    def finalize(self):
        """
        Flushes rows still buffered for the csv file.
        """
        if self.printer is not None:
            self.printer.flush()
