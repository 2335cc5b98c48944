#!/usr/bin/env python3
"""Wire the local working directory to the newly created remote."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from repo_prompts import Ask, confirm
from shell_ops import CommandFailedError, ShellOperations, UserCancelledError


@dataclass
class LinkResult:
    initialized: bool
    remote_action: str  # "added", "updated" or "unchanged"
    pushed_branch: Optional[str]


class RemoteLinker:
    """Helpers for init, remote wiring and the first push."""

    @staticmethod
    def is_git_repo(repo: Path) -> bool:
        """True only when ``repo`` is itself a repository root, not a subdirectory of one."""
        return (repo / ".git").exists()

    @staticmethod
    def init(repo: Path) -> None:
        ShellOperations.run(["git", "init"], cwd=repo)

    @staticmethod
    def remote_names(repo: Path) -> List[str]:
        out = ShellOperations.run(["git", "remote"], cwd=repo)
        return [line.strip() for line in out.splitlines() if line.strip()]

    @staticmethod
    def current_branch(repo: Path) -> str | None:
        # symbolic-ref also works on an unborn branch, unlike rev-parse.
        result = ShellOperations.capture(["git", "symbolic-ref", "--short", "-q", "HEAD"], cwd=repo)
        branch = result.stdout.strip()
        return branch or None

    @staticmethod
    def has_commits(repo: Path) -> bool:
        return ShellOperations.ok(["git", "rev-parse", "--verify", "--quiet", "HEAD"], cwd=repo)

    @staticmethod
    def set_remote(repo: Path, remote: str, url: str, *, ask: Ask = input) -> str:
        """Add ``remote`` pointing at ``url``, or update it after confirmation."""
        if remote not in RemoteLinker.remote_names(repo):
            ShellOperations.run(["git", "remote", "add", remote, url], cwd=repo)
            print(f"🔗 Added remote '{remote}' -> {url}")
            return "added"

        existing = ShellOperations.run(["git", "remote", "get-url", remote], cwd=repo)
        if existing == url:
            print(f"🔗 Remote '{remote}' already points to {url}")
            return "unchanged"

        print(f"⚠️  Remote '{remote}' already exists and points to {existing}")
        if not confirm(f"Overwrite '{remote}' with {url}?", default=False, ask=ask):
            raise UserCancelledError(f"Kept existing remote '{remote}'; nothing was linked.")
        ShellOperations.run(["git", "remote", "set-url", remote, url], cwd=repo)
        print(f"🔗 Updated remote '{remote}' -> {url}")
        return "updated"

    @staticmethod
    def push(repo: Path, remote: str) -> str | None:
        """Push the current branch with upstream tracking; return the branch pushed."""
        branch = RemoteLinker.current_branch(repo)
        if branch is None:
            raise CommandFailedError(
                ["git", "push", "-u", remote], 1, "HEAD is detached; check out a branch before pushing"
            )
        if not RemoteLinker.has_commits(repo):
            print(f"ℹ️  Branch '{branch}' has no commits yet; skipping push.")
            return None
        ShellOperations.run(["git", "push", "-u", remote, branch], cwd=repo)
        print(f"✅ Pushed '{branch}' and set upstream to {remote}/{branch}")
        return branch

    @staticmethod
    def link(repo: Path, url: str, *, remote: str = "origin", push: bool = True, ask: Ask = input) -> LinkResult:
        initialized = False
        if not RemoteLinker.is_git_repo(repo):
            RemoteLinker.init(repo)
            initialized = True
            print(f"✅ Initialized git repository in {repo}")
        action = RemoteLinker.set_remote(repo, remote, url, ask=ask)
        pushed = RemoteLinker.push(repo, remote) if push else None
        return LinkResult(initialized=initialized, remote_action=action, pushed_branch=pushed)
