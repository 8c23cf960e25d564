from pathlib import Path
from typing import Any

import pytest

from tests.fakes import FakeEngine


@pytest.fixture
def fake_engine_factory():
    def factory(**kwargs: Any) -> FakeEngine:
        kwargs.setdefault("config_path", Path("/tmp/.textlintrc"))
        return FakeEngine(**kwargs)

    return factory
