#!/usr/bin/env python3
"""Locate the GitHub CLI and install it through the host package manager."""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Sequence

from repo_prompts import Ask, confirm
from shell_ops import MissingDependencyError, ShellOperations

logger = logging.getLogger(__name__)

GH_BINARY = "gh"


@dataclass(frozen=True)
class InstallPlan:
    manager: str
    args: List[str]
    # Output fragments that mean "already installed" even on a non-zero exit.
    ok_markers: Sequence[str] = field(default_factory=tuple)
    capture: bool = False


def _sudo_prefix() -> List[str]:
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None or geteuid() == 0:
        return []
    return ["sudo"] if ShellOperations.which("sudo") else []


def _linux_plans() -> List[InstallPlan]:
    sudo = _sudo_prefix()
    return [
        InstallPlan("brew", ["brew", "install", "gh"]),
        InstallPlan("apt-get", [*sudo, "apt-get", "install", "-y", "gh"]),
        InstallPlan("dnf", [*sudo, "dnf", "install", "-y", "gh"]),
        InstallPlan("pacman", [*sudo, "pacman", "-S", "--noconfirm", "github-cli"]),
        InstallPlan("zypper", [*sudo, "zypper", "install", "-y", "gh"]),
    ]


def candidate_plans(platform: str) -> List[InstallPlan]:
    """Return install plans for ``platform`` in order of preference."""
    if platform == "darwin":
        return [InstallPlan("brew", ["brew", "install", "gh"])]
    if platform == "win32":
        return [
            InstallPlan(
                "winget",
                [
                    "winget",
                    "install",
                    "--id",
                    "GitHub.cli",
                    "-e",
                    "--accept-source-agreements",
                    "--accept-package-agreements",
                ],
                ok_markers=("No newer package versions are available", "already installed"),
                capture=True,
            ),
            InstallPlan("choco", ["choco", "install", "gh", "-y"]),
        ]
    if platform.startswith("linux"):
        return _linux_plans()
    return []


class GhInstaller:
    """Ensure the ``gh`` binary is available, installing it when allowed."""

    @staticmethod
    def is_installed() -> bool:
        return ShellOperations.which(GH_BINARY) is not None

    @staticmethod
    def select_plan(platform: str) -> InstallPlan:
        plans = candidate_plans(platform)
        if not plans:
            raise MissingDependencyError(f"Unsupported operating system: {platform}")
        for plan in plans:
            if ShellOperations.which(plan.manager):
                return plan
        managers = ", ".join(plan.manager for plan in plans)
        raise MissingDependencyError(f"No supported package manager found (tried: {managers})")

    @staticmethod
    def install(plan: InstallPlan) -> None:
        print(f"📦 Installing GitHub CLI with {plan.manager}...")
        if plan.capture:
            result = ShellOperations.capture(plan.args)
            output = f"{result.stdout}\n{result.stderr}"
            if result.returncode != 0 and not any(marker in output for marker in plan.ok_markers):
                detail = result.stderr.strip() or result.stdout.strip()
                raise MissingDependencyError(f"Failed to install GitHub CLI using {plan.manager}: {detail}")
            return
        status = ShellOperations.interactive(plan.args)
        if status != 0:
            raise MissingDependencyError(
                f"Failed to install GitHub CLI using {plan.manager} (exit status {status})"
            )

    @staticmethod
    def ensure(*, ask: Ask = input, platform: str | None = None) -> bool:
        """Make sure ``gh`` resolves on PATH.

        Returns True when an install was performed, False when ``gh`` was
        already present. Raises MissingDependencyError when it cannot be made
        available.
        """
        if GhInstaller.is_installed():
            print("✅ GitHub CLI is already installed.")
            return False

        print("ℹ️  The GitHub CLI is required for authentication, repository creation, and other GitHub operations.")
        if not confirm("Do you want to install it?", default=False, ask=ask):
            raise MissingDependencyError("User opted not to install the GitHub CLI.")

        plan = GhInstaller.select_plan(platform or sys.platform)
        logger.debug("selected install plan: %s", plan)
        GhInstaller.install(plan)

        if not GhInstaller.is_installed():
            raise MissingDependencyError(
                "GitHub CLI was installed but is not on PATH yet. Open a new shell and rerun quack."
            )
        print("✅ GitHub CLI installed.")
        return True
