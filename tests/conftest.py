import pytest

from acolor.config import use_backend


@pytest.fixture(params=["math", "numpy"])
def backend(request):
    """Run the test once per numeric backend."""
    with use_backend(request.param):
        yield request.param
