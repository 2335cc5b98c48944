#!/usr/bin/env python3
"""Process helpers and error types shared by every setup step."""
from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class QuackError(Exception):
    """Raised when a setup step cannot continue."""

    def __init__(self, message: str, *, step: str | None = None) -> None:
        super().__init__(message)
        self.step = step


class MissingDependencyError(QuackError):
    """A required binary is absent and cannot be installed."""


class AuthenticationError(QuackError):
    """GitHub login failed or was declined."""


class UserCancelledError(QuackError):
    """The user aborted a prompt or declined a required confirmation."""


class CommandFailedError(QuackError):
    """An external command exited with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, output: str, *, step: str | None = None) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.output = output
        detail = output or f"exit status {returncode}"
        super().__init__(f"{' '.join(args)} failed: {detail}", step=step)


class ShellOperations:
    """Thin wrappers around external command invocations."""

    @staticmethod
    def which(binary: str) -> str | None:
        """Return the resolved path of ``binary`` on PATH, or None."""
        return shutil.which(binary)

    @staticmethod
    def capture(args: Sequence[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        """Run a command with captured output; never raise on exit status."""
        logger.debug("run: %s (cwd=%s)", " ".join(args), cwd)
        try:
            return subprocess.run(
                list(args),
                cwd=str(cwd) if cwd else None,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as exc:
            raise MissingDependencyError(f"could not launch '{args[0]}': {exc}") from exc

    @staticmethod
    def run(args: Sequence[str], *, cwd: Path | None = None) -> str:
        """Run a command and return stripped stdout; raise on failure."""
        result = ShellOperations.capture(args, cwd=cwd)
        if result.returncode != 0:
            stderr = result.stderr.strip() or result.stdout.strip()
            raise CommandFailedError(args, result.returncode, stderr)
        return result.stdout.strip()

    @staticmethod
    def ok(args: Sequence[str], *, cwd: Path | None = None) -> bool:
        """Return True when the command exits with status 0."""
        logger.debug("check: %s (cwd=%s)", " ".join(args), cwd)
        try:
            result = subprocess.run(
                list(args),
                cwd=str(cwd) if cwd else None,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            return False
        return result.returncode == 0

    @staticmethod
    def interactive(args: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run a command attached to the terminal and return its exit status."""
        logger.debug("interactive: %s (cwd=%s)", " ".join(args), cwd)
        try:
            return subprocess.run(list(args), cwd=str(cwd) if cwd else None, check=False).returncode
        except OSError as exc:
            raise MissingDependencyError(f"could not launch '{args[0]}': {exc}") from exc
