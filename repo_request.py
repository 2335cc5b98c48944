#!/usr/bin/env python3
"""Repository parameters collected from the user."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"

    @property
    def flag(self) -> str:
        """The ``gh repo create`` flag for this visibility."""
        return f"--{self.value}"


@dataclass(frozen=True)
class RepoRequest:
    name: str
    visibility: Visibility
