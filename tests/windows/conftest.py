from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def windows_fs(fake_fs: Callable[..., object]) -> Callable[..., object]:
    return partial(fake_fs, windows=True)
