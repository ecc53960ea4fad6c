import pytest

from uniaz import UniAz


def pytest_addoption(parser):
    """Adds the --runslow command-line option to pytest."""
    parser.addoption(
        "--runslow",
        action="store_true",
        default=False,
        help="Run tests marked slow, such as the full Unicode range sweep.",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(scope="module")
def codec():
    """A default-configured codec shared by the tests of a module."""
    return UniAz()


def scalar_values(step=1):
    """All valid Unicode scalar values, optionally strided."""
    for value in range(0, 0x110000, step):
        if not 0xD800 <= value <= 0xDFFF:
            yield value
