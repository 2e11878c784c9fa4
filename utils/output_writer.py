# utils/output_writer.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Writers for the verdict file and the per-object history files

"""Output files of a run.

    out.txt     one verdict line per evaluated schedule
    <obj>.txt   one ``<schedule_id>,<read|write>,<moment>`` line per admitted
                operation on object ``obj``

Outputs of a previous run are removed before evaluation starts, and objects
without any admitted operation get no file.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Union

from core.reporter import OutcomeReporter
from utils.logger import get_logger

PathLike = Union[str, Path]


def object_log_path(log_dir: PathLike, object_name: str) -> Path:
    return Path(log_dir) / f"{object_name}.txt"


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8") as file:
        for line in lines:
            file.write(line + "\n")


def clear_object_logs(log_dir: PathLike, object_names: Iterable[str]) -> None:
    """Delete history files left over from a previous run."""
    logger = get_logger()
    for name in object_names:
        path = object_log_path(log_dir, name)
        if path.exists():
            path.unlink()
            logger.debug(f"Removed stale log {path}")


def clear_outputs(
    output_path: PathLike, log_dir: PathLike, object_names: Iterable[str]
) -> None:
    """Delete the verdict file and history files left over from a previous run."""
    path = Path(output_path)
    if path.exists():
        path.unlink()
        get_logger().debug(f"Removed stale verdict file {path}")
    clear_object_logs(log_dir, object_names)


def write_verdicts(output_path: PathLike, verdict_lines: List[str]) -> Path:
    path = Path(output_path)
    _write_lines(path, verdict_lines)
    get_logger().debug(f"Wrote {len(verdict_lines)} verdicts to {path}")
    return path


def write_object_logs(log_dir: PathLike, object_logs: Dict[str, List[str]]) -> List[Path]:
    """Write one history file per object that has entries.

    Args:
        log_dir: Directory receiving ``<object>.txt`` files
        object_logs: History lines per object name

    Returns:
        Paths of the files written
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    clear_object_logs(directory, object_logs)

    written = []
    for name, lines in object_logs.items():
        if not lines:
            continue
        path = object_log_path(directory, name)
        _write_lines(path, lines)
        written.append(path)
    return written


def write_report(
    reporter: OutcomeReporter, output_path: PathLike, log_dir: PathLike
) -> List[Path]:
    """Write the verdict file and every object history of a finished run.

    Returns:
        The verdict file path followed by the history file paths
    """
    verdict_path = write_verdicts(output_path, reporter.verdict_lines())
    return [verdict_path] + write_object_logs(log_dir, reporter.object_logs())
