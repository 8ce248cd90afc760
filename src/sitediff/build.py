#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/build.py
"""External build and format commands.

These helpers prepare the two site variants before they are collected. They
are the only part of sitediff that starts processes; every failure is raised
as :class:`BuildError` so a run stops before anything is compared.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from sitediff.constants import OUTPUT_DIR_PLACEHOLDER
from sitediff.exceptions import BuildError, ValidationError

logger = logging.getLogger(__name__)


def reset_output_dir(path: str | Path) -> None:
    """Remove an output directory tree; a missing directory is not an error.

    Raises
    ------
    BuildError
        If the directory exists but cannot be removed

    """
    path = Path(path)
    logger.info("Removing output directory %s", path)
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        raise BuildError(f"Failed to remove output directory {path}: {e}", original_error=e) from e


def expand_command(command: Sequence[str], mapping: Mapping[str, str]) -> list[str]:
    """Substitute placeholders in every argument of ``command``.

    Examples
    --------
        >>> expand_command(["zola", "build", "--output-dir", "{output_dir}"], {"{output_dir}": "out"})
        ['zola', 'build', '--output-dir', 'out']

    """
    result = []
    for value in command:
        expanded = value
        for key, replacement in mapping.items():
            expanded = expanded.replace(key, replacement)
        result.append(expanded)
    return result


def run_command(command: Sequence[str], *, description: str, cwd: str | Path | None = None) -> None:
    """Run ``command`` and raise if it does not succeed.

    Parameters
    ----------
    command : sequence of str
        Program and arguments; no shell is involved
    description : str
        Short description used in log and error messages
    cwd : str or Path, optional
        Working directory for the command

    Raises
    ------
    ValidationError
        If ``command`` is empty
    BuildError
        If the program cannot be started or exits with a non-zero status

    """
    if not command:
        raise ValidationError(f"No command configured to {description}", parameter_name="command")

    cmd = list(command)
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, cwd=cwd)
    except OSError as e:
        raise BuildError(f"Failed to {description}: {e}", command=cmd, original_error=e) from e

    if result.returncode != 0:
        raise BuildError(
            f"Failed to {description}: command exited with status {result.returncode}",
            command=cmd,
            returncode=result.returncode,
        )


def build_site(command: Sequence[str], output_dir: str | Path, label: str, cwd: str | Path | None = None) -> None:
    """Build one site variant into ``output_dir``."""
    logger.info("Building %s site", label)
    cmd = expand_command(command, {OUTPUT_DIR_PLACEHOLDER: str(output_dir)})
    run_command(cmd, description=f"build {label} site", cwd=cwd)


def format_site(command: Sequence[str], output_dir: str | Path, cwd: str | Path | None = None) -> None:
    """Run the formatter over a built site so both variants are normalized alike."""
    logger.info("Formatting %s", output_dir)
    cmd = expand_command(command, {OUTPUT_DIR_PLACEHOLDER: str(output_dir)})
    run_command(cmd, description=f"format {output_dir}", cwd=cwd)
