# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: pure logic, no processes
- tier2: spawns the fake tagger below as a real child process

The fake tagger reads one path per line. If the file's basename is a key of
the JSON responses file given as its first argument, the stored text is
written verbatim (no trailing newline). Otherwise it scans the file for
`@kind:name` tokens and reports them in reverse order, each with the
child's pid as an extra field.
"""

from __future__ import annotations

import json
import shlex
import sys
import textwrap
from pathlib import Path
from typing import Dict, Optional

import pytest

FAKE_TAGGER = textwrap.dedent(
    '''
    import json
    import os
    import sys

    responses = {}
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as f:
            responses = json.load(f)

    for request in iter(sys.stdin.readline, ""):
        path = request.rstrip("\\n")
        key = os.path.basename(path)
        if key in responses:
            sys.stdout.write(responses[key])
            sys.stdout.flush()
            continue

        tags = []
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            for number, text in enumerate(f, 1):
                for word in text.split():
                    if word.startswith("@") and ":" in word:
                        kind, name = word[1:].split(":", 1)
                        tags.append({"name": name, "kind": kind, "line": number, "pid": os.getpid()})
        tags.reverse()
        sys.stdout.write(json.dumps(tags))
        sys.stdout.flush()
    '''
)


@pytest.fixture
def tagger_script(tmp_path: Path) -> Path:
    script = tmp_path / "fake_tagger.py"
    script.write_text(FAKE_TAGGER, encoding="utf-8")
    return script


@pytest.fixture
def tagger_command(tmp_path: Path, tagger_script: Path):
    """Build a command line for the fake tagger with optional canned responses."""

    def build(responses: Optional[Dict[str, str]] = None) -> str:
        parts = [sys.executable, str(tagger_script)]
        if responses is not None:
            responses_file = tmp_path / "responses.json"
            responses_file.write_text(json.dumps(responses), encoding="utf-8")
            parts.append(str(responses_file))
        return " ".join(shlex.quote(part) for part in parts)

    return build
