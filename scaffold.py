"""Starter README and LICENSE files."""
from __future__ import annotations

from pathlib import Path
from typing import List

LICENSE_HEADER = "GNU GENERAL PUBLIC LICENSE\nVersion 3, 29 June 2007\n"


def write_starter_files(repo: Path, repo_name: str) -> List[Path]:
    """Create README.md and LICENSE when missing; return the files written."""
    written: List[Path] = []
    files = {
        "README.md": f"# {repo_name}\n",
        "LICENSE": LICENSE_HEADER,
    }
    for filename, content in files.items():
        path = repo / filename
        if path.exists():
            continue
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written
