import pytest

from log_anon_lib import Anonymizer
from log_anon_lib.anonymizer.core.default import reset_default_anonymizer


@pytest.fixture(autouse=True)
def _fresh_default_anonymizer():
    reset_default_anonymizer()
    yield
    reset_default_anonymizer()


@pytest.fixture
def ip_anonymizer():
    """IPv4 only, empty salt."""
    return Anonymizer.from_data_types("IP4", salt=b"")
