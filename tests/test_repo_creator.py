from __future__ import annotations

import pytest

from repo_creator import RepoCreator, extract_url
from repo_request import RepoRequest, Visibility
from shell_ops import CommandFailedError

DEMO = RepoRequest(name="demo-repo", visibility=Visibility.PRIVATE)
DEMO_URL = "https://github.com/octocat/demo-repo"


def test_extract_url_picks_first_url_line() -> None:
    output = "✓ Created repository octocat/demo-repo on GitHub\n  https://github.com/octocat/demo-repo\n"
    assert extract_url(output) == DEMO_URL
    assert extract_url("git@github.com:octocat/demo-repo.git") == "git@github.com:octocat/demo-repo.git"
    assert extract_url("nothing useful") is None


def test_create_passes_name_and_visibility(shell) -> None:
    shell.on("gh", "repo", "create", stdout=DEMO_URL + "\n")

    assert RepoCreator.create(DEMO) == DEMO_URL
    assert shell.calls == [("gh", "repo", "create", "demo-repo", "--private")]


def test_create_surfaces_gh_error_text(shell) -> None:
    shell.on("gh", "repo", "create", returncode=1, stderr="HTTP 401: Bad credentials\n")

    with pytest.raises(CommandFailedError) as info:
        RepoCreator.create(DEMO)
    assert info.value.output == "HTTP 401: Bad credentials"
    assert info.value.returncode == 1
    assert "HTTP 401: Bad credentials" in str(info.value)


def test_create_without_url_in_output_fails(shell) -> None:
    shell.on("gh", "repo", "create", stdout="done\n")

    with pytest.raises(CommandFailedError, match="could not capture GitHub URL"):
        RepoCreator.create(DEMO)


def test_existing_repository_can_be_reused(shell, scripted) -> None:
    shell.on(
        "gh", "repo", "create",
        returncode=1,
        stderr="GraphQL: Name already exists on this account (createRepository)",
    )
    shell.on("gh", "repo", "view", "demo-repo", stdout=DEMO_URL + "\n")

    assert RepoCreator.create_or_reuse(DEMO, ask=scripted("y")) == DEMO_URL
    assert shell.called("gh", "repo", "view", "demo-repo", "--json", "url", "-q", ".url")


def test_existing_repository_declined_reraises(shell, scripted) -> None:
    shell.on("gh", "repo", "create", returncode=1, stderr="Name already exists on this account")

    with pytest.raises(CommandFailedError, match="already exists"):
        RepoCreator.create_or_reuse(DEMO, ask=scripted("n"))
    assert not shell.called("gh", "repo", "view")


def test_other_failures_do_not_offer_reuse(shell, scripted) -> None:
    shell.on("gh", "repo", "create", returncode=1, stderr="network unreachable")
    ask = scripted()

    with pytest.raises(CommandFailedError, match="network unreachable"):
        RepoCreator.create_or_reuse(DEMO, ask=ask)
    assert ask.prompts == []
