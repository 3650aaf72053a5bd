"""Run the Tika process and capture its output."""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tika_pipeline.core.exceptions import ExtractionFailure
from tika_pipeline.core.logging import get_logger
from tika_pipeline.extraction.command import format_command

logger = get_logger(__name__)


@dataclass
class ProcessResult:
    """Outcome of one process invocation."""

    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = field(default="", repr=False)

    @property
    def is_success(self) -> bool:
        """Check if the process exited with status 0."""
        return self.returncode == 0


class ProcessRunner(ABC):
    """Runs a command synchronously and returns its captured output."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run ``args`` and wait for completion."""


class SubprocessRunner(ProcessRunner):
    """Process runner backed by :func:`subprocess.run`."""

    def __init__(self, encoding: str = "UTF-8", timeout: Optional[float] = None) -> None:
        """Initialize runner.

        Args:
            encoding: Character set used to decode stdout and stderr.
            timeout: Seconds to wait for each process, or None to wait forever.
        """
        self.encoding = encoding
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> ProcessResult:
        args = [str(arg) for arg in args]
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ExtractionFailure(
                f"Process timed out after {self.timeout}s",
                command=format_command(args),
            ) from e
        except OSError as e:
            raise ExtractionFailure(
                f"Cannot start process {args[0]}: {e}",
                command=format_command(args),
            ) from e

        logger.debug(f"Process {args[0]} exited with status {completed.returncode}")
        return ProcessResult(
            args=args,
            returncode=completed.returncode,
            stdout=self._decode(completed.stdout),
            stderr=self._decode(completed.stderr),
        )

    def _decode(self, data: Optional[bytes]) -> str:
        if not data:
            return ""
        try:
            return data.decode(self.encoding, errors="replace")
        except LookupError:
            # unknown charset name, fall back to utf-8
            return data.decode("utf-8", errors="replace")
