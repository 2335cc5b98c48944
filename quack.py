#!/usr/bin/env python3
"""One-shot GitHub setup: install gh, log in, create a repo and link it."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from gh_auth import GhAuth
from gh_installer import GhInstaller
from remote_linker import LinkResult, RemoteLinker
from repo_creator import RepoCreator
from repo_prompts import Ask, ask_repo_request, confirm
from repo_request import RepoRequest
from scaffold import write_starter_files
from shell_ops import QuackError, UserCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def print_intro() -> None:
    print("\n🦆 Welcome to Quack! 🦆")
    print("\nMaking your GitHub life easier by:")
    print("  - Ensuring GitHub CLI is installed")
    print("  - Authenticating you with GitHub")
    print("  - Creating a new GitHub repository")
    print("  - Linking the new repo to your local repo")
    print("\nLet's get started!")


@dataclass
class PipelineResult:
    url: str
    request: RepoRequest
    installed_gh: bool
    logged_in: bool
    link: Optional[LinkResult]
    scaffolded: List[Path]


class SetupPipeline:
    """Run the setup steps in order, stopping at the first failure."""

    def __init__(
        self,
        directory: Path,
        *,
        remote: str = "origin",
        push: bool = True,
        scaffold: bool = False,
        ask: Ask = input,
        platform: str | None = None,
    ) -> None:
        self.directory = directory
        self.remote = remote
        self.push = push
        self.scaffold = scaffold
        self.ask = ask
        self.platform = platform

    @staticmethod
    def _step(name: str, action: Callable[[], T]) -> T:
        logger.debug("step %s: start", name)
        try:
            return action()
        except QuackError as exc:
            if exc.step is None:
                exc.step = name
            raise

    def run(self) -> PipelineResult:
        installed = self._step("install", lambda: GhInstaller.ensure(ask=self.ask, platform=self.platform))
        logged_in = self._step("auth", GhAuth.ensure)
        request = self._step("prompt", lambda: ask_repo_request(self.ask))
        url = self._step(
            "create", lambda: RepoCreator.create_or_reuse(request, cwd=self.directory, ask=self.ask)
        )

        link: Optional[LinkResult] = None
        if self._step("link", lambda: confirm("\nLink local repo with new repo?", default=True, ask=self.ask)):
            link = self._step(
                "link",
                lambda: RemoteLinker.link(self.directory, url, remote=self.remote, push=self.push, ask=self.ask),
            )
        else:
            print("ℹ️  Skipped setting git remotes.")

        scaffolded: List[Path] = []
        if self.scaffold:
            scaffolded = write_starter_files(self.directory, request.name)
            for path in scaffolded:
                print(f"📝 Created {path.name}")

        return PipelineResult(
            url=url,
            request=request,
            installed_gh=installed,
            logged_in=logged_in,
            link=link,
            scaffolded=scaffolded,
        )


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Install the GitHub CLI if needed, log in, create a GitHub repository and link it."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Local project directory to link (default: current directory)",
    )
    parser.add_argument("--remote", default="origin", help="Name of the git remote to add (default: origin)")
    parser.add_argument("--no-push", action="store_true", help="Link the remote without pushing")
    parser.add_argument("--scaffold", action="store_true", help="Write README.md and LICENSE if missing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every external command")
    return parser.parse_args(argv)


def resolve_directory(arg_dir: str) -> Path:
    directory = Path(arg_dir).expanduser().resolve()
    if not directory.is_dir():
        raise QuackError(f"Directory '{directory}' not found", step="setup")
    return directory


def report(result: PipelineResult) -> None:
    if result.link is None:
        print(f"\n🎉 GitHub repository created: {result.url}")
    elif result.link.pushed_branch:
        print(f"\n🎉 GitHub repository created, linked and pushed: {result.url}")
    else:
        print(f"\n🎉 GitHub repository created and linked: {result.url}")
        print("   You can now add, commit, and push files.")
    if result.scaffolded:
        names = " ".join(path.name for path in result.scaffolded)
        print(f"   Starter files are not committed yet: git add {names} && git commit && git push")


def main(argv: List[str] | None = None, *, ask: Ask = input) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        directory = resolve_directory(args.directory)
        print_intro()
        pipeline = SetupPipeline(
            directory,
            remote=args.remote,
            push=not args.no_push,
            scaffold=args.scaffold,
            ask=ask,
        )
        report(pipeline.run())
    except UserCancelledError as exc:
        print(f"Cancelled ({exc.step or 'setup'}): {exc}", file=sys.stderr)
        return 1
    except QuackError as exc:
        print(f"Error ({exc.step or 'setup'}): {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nCancelled: interrupted by user", file=sys.stderr)
        return 130
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
