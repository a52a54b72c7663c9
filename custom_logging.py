import sys
from pathlib import Path
from datetime import datetime
import logging
import atexit
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
STDERR_LOG_NAME = "stderr.log"


class BufferedTeeWriter:
    """Writes everything to a log file and to the stream it replaces."""

    def __init__(self, filepath: Path, original_stream):
        self.file = open(filepath, 'a', buffering=8192)
        self.original_stream = original_stream
        atexit.register(self.cleanup)

    def write(self, data: str) -> None:
        try:
            self.file.write(data)
            self.original_stream.write(data)
        except (IOError, OSError) as e:
            logging.error(f"Failed to write to log: {e}")

    def flush(self) -> None:
        if self.file and not self.file.closed:
            try:
                self.file.flush()
                self.original_stream.flush()
            except (IOError, OSError) as e:
                logging.error(f"Failed to flush log: {e}")

    def isatty(self) -> bool:
        # never a terminal, so callers skip color codes
        return False

    def cleanup(self) -> None:
        if self.file and not self.file.closed:
            try:
                self.file.flush()
                self.file.close()
            except (IOError, OSError) as e:
                self.original_stream.write(f"Failed to close log: {e}\n")


def rotate_log_if_needed(log_file: Path, max_size_bytes: int = 10_000_000) -> Optional[Path]:
    """
    Rotate the log file if it exceeds the maximum size.

    The oversized file is renamed to ``stderr_<timestamp>.log`` and the next
    write starts a fresh one.

    Returns:
        Path of the backup file, or None if nothing was rotated
    """
    if log_file.exists() and log_file.stat().st_size > max_size_bytes:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_file = log_file.with_name(f"stderr_{timestamp}.log")
        log_file.rename(backup_file)
        return backup_file
    return None


def setup_logging(
    log_dir: str = "logs",
    level: Union[int, str] = "INFO",
    tee_stderr: bool = True,
    max_bytes: int = 10_000_000,
) -> Optional[Path]:
    """
    Set up logging for the time API process.

    Args:
        log_dir: Directory to store the log file
        level: Root log level, as a name or a number
        tee_stderr: Also copy everything written to stderr into the log file
        max_bytes: Rotate an existing log file above this size

    Returns:
        Path to the log file or None if setup fails
    """
    try:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        stderr_log = log_path / STDERR_LOG_NAME
        rotate_log_if_needed(stderr_log, max_bytes)

        with open(stderr_log, 'a') as f:
            f.write(f"\n{'='*80}\n")
            f.write(f"New logging session started at {datetime.now()}\n")
            f.write(f"{'='*80}\n\n")

        if isinstance(level, str):
            level = level.upper()

        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[
                logging.StreamHandler(sys.stdout)
            ],
            force=True,
        )

        if tee_stderr:
            sys.stderr = BufferedTeeWriter(stderr_log, sys.__stderr__)

        return stderr_log

    except (OSError, ValueError) as e:
        logging.error(f"Failed to setup logging: {e}")
        return None
