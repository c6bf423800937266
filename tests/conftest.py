from typing import Callable
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_response() -> Callable[[int, bytes], MagicMock]:
    def _make_response(status: int, body: bytes) -> MagicMock:
        response = MagicMock()
        response.status = status
        response.read.return_value = body
        return response

    return _make_response
