from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from addon_starter.assembler import TemplateAssembler  # noqa: E402
from addon_starter.naming import NameDeriver  # noqa: E402


@pytest.fixture()
def deriver() -> NameDeriver:
    return NameDeriver()


@pytest.fixture()
def assembler() -> TemplateAssembler:
    return TemplateAssembler()
