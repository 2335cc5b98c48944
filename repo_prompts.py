#!/usr/bin/env python3
"""Interactive questions asked during setup."""
from __future__ import annotations

import re
from typing import Callable

from repo_request import RepoRequest, Visibility
from shell_ops import UserCancelledError

Ask = Callable[[str], str]

REPO_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

_VISIBILITY_ANSWERS = {
    "": Visibility.PUBLIC,
    "y": Visibility.PUBLIC,
    "yes": Visibility.PUBLIC,
    "public": Visibility.PUBLIC,
    "n": Visibility.PRIVATE,
    "no": Visibility.PRIVATE,
    "private": Visibility.PRIVATE,
}


def _read(ask: Ask, prompt: str) -> str:
    try:
        return ask(prompt)
    except (EOFError, KeyboardInterrupt) as exc:
        raise UserCancelledError("Prompt cancelled by user") from exc


def is_valid_repo_name(name: str) -> bool:
    """Return True for names GitHub accepts: letters, digits, '.', '-' and '_'."""
    return bool(REPO_NAME_PATTERN.fullmatch(name))


def ask_repo_name(ask: Ask = input) -> str:
    """Ask for a repository name until a non-empty, valid one is entered."""
    while True:
        name = _read(ask, "\n📝 New repo name?: ").strip()
        if not name:
            print("⚠️  Repository name cannot be empty.")
            continue
        if not is_valid_repo_name(name):
            print("⚠️  Invalid repository name. Only letters, digits, '.', '-' and '_' are allowed.")
            continue
        return name


def ask_visibility(ask: Ask = input) -> Visibility:
    """Ask whether the repository is public or private (default public)."""
    while True:
        answer = _read(ask, "🔒 Make repo public? (Y/n or public/private): ").strip().lower()
        if answer in _VISIBILITY_ANSWERS:
            return _VISIBILITY_ANSWERS[answer]
        print("⚠️  Invalid option. Type 'Y' for public or 'n' for private.")


def confirm(prompt: str, *, default: bool, ask: Ask = input) -> bool:
    suffix = "(Y/n)" if default else "(y/N)"
    while True:
        answer = _read(ask, f"{prompt} {suffix}: ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("⚠️  Please answer 'y' or 'n'.")


def ask_repo_request(ask: Ask = input) -> RepoRequest:
    name = ask_repo_name(ask)
    visibility = ask_visibility(ask)
    return RepoRequest(name=name, visibility=visibility)
