"""Shared test fixtures: a scripted shell and scripted prompt answers."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import pytest

from shell_ops import ShellOperations


@dataclass
class Rule:
    prefix: Tuple[str, ...]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    exact: bool = False
    times: Optional[int] = None
    adds: Optional[str] = None

    def matches(self, args: Sequence[str]) -> bool:
        if self.exact:
            return tuple(args) == self.prefix
        return tuple(args[: len(self.prefix)]) == self.prefix


@dataclass
class FakeShell:
    """Records commands and answers them from registered rules."""

    binaries: set = field(default_factory=set)
    rules: List[Rule] = field(default_factory=list)
    calls: List[Tuple[str, ...]] = field(default_factory=list)

    def on(self, *prefix: str, **kwargs) -> "FakeShell":
        self.rules.append(Rule(prefix=tuple(prefix), **kwargs))
        return self

    def called(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == prefix for call in self.calls)

    def commands(self, program: str) -> List[Tuple[str, ...]]:
        return [call for call in self.calls if call and call[0] == program]

    def _respond(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        self.calls.append(tuple(args))
        for rule in self.rules:
            if not rule.matches(args):
                continue
            if rule.times is not None:
                rule.times -= 1
                if rule.times <= 0:
                    self.rules.remove(rule)
            if rule.adds:
                self.binaries.add(rule.adds)
            return subprocess.CompletedProcess(list(args), rule.returncode, rule.stdout, rule.stderr)
        return subprocess.CompletedProcess(list(args), 0, "", "")

    def which(self, binary: str) -> Optional[str]:
        return f"/usr/bin/{binary}" if binary in self.binaries else None

    def capture(self, args, *, cwd=None) -> subprocess.CompletedProcess:
        return self._respond(args)

    def ok(self, args, *, cwd=None) -> bool:
        return self._respond(args).returncode == 0

    def interactive(self, args, *, cwd=None) -> int:
        return self._respond(args).returncode


@pytest.fixture
def shell(monkeypatch: pytest.MonkeyPatch) -> FakeShell:
    fake = FakeShell()
    monkeypatch.setattr(ShellOperations, "which", staticmethod(fake.which))
    monkeypatch.setattr(ShellOperations, "capture", staticmethod(fake.capture))
    monkeypatch.setattr(ShellOperations, "ok", staticmethod(fake.ok))
    monkeypatch.setattr(ShellOperations, "interactive", staticmethod(fake.interactive))
    return fake


class ScriptedAsk:
    """Answers prompts in order; raises EOFError once the script runs out."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted() -> Callable[..., ScriptedAsk]:
    def make(*answers: str) -> ScriptedAsk:
        return ScriptedAsk(answers)

    return make
