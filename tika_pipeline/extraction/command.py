"""Build Tika command lines from configuration."""

import shlex
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tika_pipeline.core.config import TikaConfig

HEADLESS_FLAG = "-Djava.awt.headless=true"
JSON_FLAG = "--json"


def build_command(config: TikaConfig) -> List[str]:
    """Build the base command shared by every document of a batch.

    Args:
        config: Tika configuration.

    Returns:
        Argument list: runtime, headless flag, jar, output mode and encoding.
    """
    command = [config.java_binary, HEADLESS_FLAG, "-jar", config.tika_binary_path]

    if config.metadata_only:
        command.append(JSON_FLAG)
    else:
        command.append(f"--{config.output_format.value}")

    command.append(f"--encoding={config.output_encoding}")
    return command


def document_command(
    base: Sequence[str],
    path: Union[str, Path],
    password: Optional[str] = None,
) -> List[str]:
    """Append the per-document arguments to a base command."""
    command = list(base)
    if password:
        command.append(f"--password={password}")
    command.append(str(path))
    return command


def format_command(command: Sequence[str]) -> str:
    """Render an argument list as a shell-quoted command string."""
    return shlex.join(command)
