"""
Process-wide default anonymizer.

The package level helpers (:func:`log_anon_lib.hide`,
:func:`log_anon_lib.anonymize`, …) share one :class:`Anonymizer` built on
first use from :data:`~log_anon_lib.constants.DEFAULT_DATA_TYPES`.  It holds
no resources, so nothing has to be torn down at exit.
"""

import threading
from typing import Any, Optional, Union

from log_anon_lib.constants import DEFAULT_DATA_TYPES
from log_anon_lib.anonymizer.core.anonymizer import Anonymizer
from log_anon_lib.anonymizer.core.writer import AnonymizingWriter

_lock = threading.Lock()
_default: Optional[Anonymizer] = None


def get_default_anonymizer() -> Anonymizer:
    """Return the shared anonymizer, creating it on the first call."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = Anonymizer.from_data_types(*DEFAULT_DATA_TYPES)
    return _default


def reset_default_anonymizer() -> None:
    """Drop the shared anonymizer; the next access builds a new one."""
    global _default
    with _lock:
        _default = None


def set_salt(salt: Union[bytes, str]) -> None:
    """Replace the salt of the default anonymizer."""
    get_default_anonymizer().set_salt(salt)


def hide(value: Any) -> str:
    """:meth:`Anonymizer.hide` using the default anonymizer."""
    return get_default_anonymizer().hide(value)


def anonymize(text: str) -> str:
    """:meth:`Anonymizer.anonymize` using the default anonymizer."""
    return get_default_anonymizer().anonymize(text)


def anonymize_payload(payload: Any) -> Any:
    return get_default_anonymizer().anonymize_payload(payload)


def writer(sink: Any) -> AnonymizingWriter:
    """:meth:`Anonymizer.writer` using the default anonymizer."""
    return get_default_anonymizer().writer(sink)
