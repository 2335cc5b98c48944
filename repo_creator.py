#!/usr/bin/env python3
"""Remote repository creation through ``gh repo create``."""
from __future__ import annotations

import logging
from pathlib import Path

from repo_prompts import Ask, confirm
from repo_request import RepoRequest
from shell_ops import CommandFailedError, ShellOperations

logger = logging.getLogger(__name__)


def extract_url(output: str) -> str | None:
    """Return the first line of ``output`` that looks like a repository URL."""
    for line in output.splitlines():
        if "https://" in line or "git@" in line:
            return line.strip()
    return None


def is_name_taken(error: CommandFailedError) -> bool:
    return "already exists" in error.output.lower()


class RepoCreator:
    """Create a GitHub repository and report its URL."""

    @staticmethod
    def create_args(request: RepoRequest) -> list[str]:
        return ["gh", "repo", "create", request.name, request.visibility.flag]

    @staticmethod
    def create(request: RepoRequest, *, cwd: Path | None = None) -> str:
        args = RepoCreator.create_args(request)
        output = ShellOperations.run(args, cwd=cwd)
        url = extract_url(output)
        if url is None:
            raise CommandFailedError(args, 0, "could not capture GitHub URL from output")
        return url

    @staticmethod
    def existing_url(name: str, *, cwd: Path | None = None) -> str:
        url = ShellOperations.run(["gh", "repo", "view", name, "--json", "url", "-q", ".url"], cwd=cwd)
        if not url:
            raise CommandFailedError(["gh", "repo", "view", name], 0, "could not resolve repository URL")
        return url

    @staticmethod
    def create_or_reuse(request: RepoRequest, *, cwd: Path | None = None, ask: Ask = input) -> str:
        """Create the repository; offer to reuse it when the name is already taken.

        This is what lets a rerun pick up after a failure that happened between
        creating the repository and linking it.
        """
        print(f"🚀 Creating {request.visibility.value} repository '{request.name}'...")
        try:
            url = RepoCreator.create(request, cwd=cwd)
        except CommandFailedError as exc:
            if not is_name_taken(exc):
                raise
            logger.debug("repository %s already exists: %s", request.name, exc.output)
            print(f"⚠️  A repository named '{request.name}' already exists on your account.")
            if not confirm("Use the existing repository?", default=False, ask=ask):
                raise
            url = RepoCreator.existing_url(request.name, cwd=cwd)
        print(f"✅ Repository available at {url}")
        return url
