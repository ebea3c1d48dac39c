from __future__ import annotations

import pytest

from networking.domain.configuration import Configuration
from tests.fakes import BASE_URL


@pytest.fixture()
def configuration() -> Configuration:
    return Configuration(BASE_URL)
