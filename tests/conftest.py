import pytest
import tonegrid as tg


@pytest.fixture(autouse=True)
def _strict_error_mode():
    tg.set_error_mode(tg.ErrorMode.STRICT)
    yield
    tg.set_error_mode(tg.ErrorMode.STRICT)
