"""Background copy and move jobs with progress reporting."""

from __future__ import annotations

import dataclasses
import enum
import os
import shutil
import stat
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from tricolumn.name_resolution import rename_filename_conflict

ProgressCallback = Callable[["IoWorkerProgress"], None]


class FileOp(enum.Enum):
    """The kind of paste operation."""

    CUT = "cut"
    COPY = "copy"


@dataclass
class IoWorkerOptions:
    """Options that govern how a paste treats existing files."""

    overwrite: bool = False
    skip_exist: bool = False

    def __str__(self) -> str:
        return (
            f"overwrite={str(self.overwrite).lower()} "
            f"skip_exist={str(self.skip_exist).lower()}"
        )


@dataclass
class IoWorkerProgress:
    """Counts of files and bytes handled so far by a job."""

    kind: FileOp
    files_processed: int
    total_files: int
    bytes_processed: int
    total_bytes: int


def _notify(report: ProgressCallback | None, progress: IoWorkerProgress) -> None:
    if report is not None:
        report(dataclasses.replace(progress))


@dataclass
class IoWorkerThread:
    """A queued paste job: move or copy ``paths`` into ``dest``."""

    kind: FileOp
    paths: list[Path]
    dest: Path
    options: IoWorkerOptions = field(default_factory=IoWorkerOptions)

    def __post_init__(self) -> None:
        self.paths = [Path(p) for p in self.paths]
        self.dest = Path(self.dest)

    def start(self, report: ProgressCallback | None = None) -> IoWorkerProgress:
        """Run the job, calling ``report`` with progress snapshots; return final progress."""
        total_files, total_bytes = self._query_number_of_items()
        progress = IoWorkerProgress(self.kind, 0, total_files, 0, total_bytes)
        operation = recursive_cut if self.kind is FileOp.CUT else recursive_copy
        for path in self.paths:
            _notify(report, progress)
            operation(path, self.dest, report, progress)
        return progress

    def _query_number_of_items(self) -> tuple[int, int]:
        total_bytes = 0
        total_files = 0
        dirs: deque[Path] = deque()
        for path in self.paths:
            info = path.lstat()
            if stat.S_ISDIR(info.st_mode):
                dirs.append(path)
            else:
                total_bytes += info.st_size
                total_files += 1
        while dirs:
            directory = dirs.popleft()
            for entry in directory.iterdir():
                if entry.is_dir():
                    dirs.append(entry)
                else:
                    total_bytes += entry.lstat().st_size
                    total_files += 1
        return total_files, total_bytes


def _destination(src: Path, dest: Path) -> Path:
    target = dest / src.name if src.name else dest
    return rename_filename_conflict(target)


def recursive_copy(
    src: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    report: ProgressCallback | None,
    progress: IoWorkerProgress,
) -> None:
    """Copy ``src`` into directory ``dest``, updating ``progress`` in place."""
    src = Path(src)
    target = _destination(src, Path(dest))
    mode = src.lstat().st_mode
    if stat.S_ISDIR(mode):
        target.mkdir()
        for entry in src.iterdir():
            recursive_copy(entry, target, report, progress)
            _notify(report, progress)
    elif stat.S_ISREG(mode):
        shutil.copyfile(src, target)
        shutil.copymode(src, target)
        progress.bytes_processed += target.stat().st_size
        progress.files_processed += 1
    elif stat.S_ISLNK(mode):
        os.symlink(os.readlink(src), target)
        progress.files_processed += 1


def recursive_cut(
    src: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    report: ProgressCallback | None,
    progress: IoWorkerProgress,
) -> None:
    """Move ``src`` into directory ``dest``, updating ``progress`` in place."""
    src = Path(src)
    target = _destination(src, Path(dest))
    info = src.lstat()
    mode = info.st_mode
    if stat.S_ISDIR(mode):
        try:
            os.rename(src, target)
        except OSError:
            target.mkdir()
            for entry in src.iterdir():
                recursive_cut(entry, target, report, progress)
            src.rmdir()
        else:
            progress.bytes_processed += info.st_size
    elif stat.S_ISREG(mode):
        try:
            os.rename(src, target)
        except OSError:
            shutil.copyfile(src, target)
            shutil.copymode(src, target)
            src.unlink()
            progress.bytes_processed += info.st_size
        progress.files_processed += 1
    elif stat.S_ISLNK(mode):
        os.symlink(os.readlink(src), target)
        src.unlink()
        progress.bytes_processed += info.st_size
        progress.files_processed += 1