"""Execute the python code blocks of README.md."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from types import ModuleType

import pytest

README_PATH = Path(__file__).resolve().parents[2] / "README.md"
PYTHON_BLOCK = re.compile(r"^```python\n(.*?)^```$", re.MULTILINE | re.DOTALL)
README_BLOCKS = PYTHON_BLOCK.findall(README_PATH.read_text(encoding="utf-8"))


def test_readme_has_python_blocks() -> None:
    assert README_BLOCKS


@pytest.mark.parametrize("source", README_BLOCKS, ids=lambda source: f"block-{README_BLOCKS.index(source)}")
def test_readme_block_runs(source: str) -> None:
    module = ModuleType("configwire_readme_block")
    sys.modules[module.__name__] = module
    try:
        exec(compile(source, str(README_PATH), "exec"), module.__dict__)  # noqa: S102
    finally:
        del sys.modules[module.__name__]
