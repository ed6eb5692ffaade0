import io

import mock
import pytest


@pytest.fixture(autouse=True)
def log_stream():
    """
    Logs everything (at debug level) to a stream which tests may inspect.
    """
    from assoc_collections.assoc_log import configure_logger

    stream = io.StringIO()
    with configure_logger("ASSOC-TESTS", 2, stream):
        yield stream


@pytest.fixture(autouse=True)
def _check_invariants():
    # Every instance created in the tests has its keys checked for uniqueness.
    from assoc_collections.options import Setup

    with mock.patch.object(Setup.options, "CHECK_INVARIANTS", True):
        yield


@pytest.fixture
def eq_ignoring_case():
    def equals(a, b):
        return a.lower() == b.lower()

    return equals
