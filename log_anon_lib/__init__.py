"""
log‑anon – keep sensitive values out of logs.

Values such as IP addresses, e‑mails or card numbers are replaced with
``"<tag>:<token>"``; the token is a salted digest, identical for identical
values within one run::

    >>> import log_anon_lib
    >>> log_anon_lib.set_salt(b"")
    >>> log_anon_lib.anonymize("My address is 192.168.10.25")
    'My address is IP:go7YgcKQDilELfBiQr3HIXGHEXd'
"""

from log_anon_lib.exceptions import (
    LogAnonError,
    UnknownDataTypeError,
    InvalidPatternError,
)
from log_anon_lib.anonymizer.core import (
    Anonymizer,
    AnonymizingWriter,
    DetectorRuleI,
)
from log_anon_lib.anonymizer.data_type import DataType, data_type_from_string
from log_anon_lib.anonymizer.core.default import (
    get_default_anonymizer,
    set_salt,
    hide,
    anonymize,
    anonymize_payload,
    writer,
)
from log_anon_lib.anonymizer.log_formatter import AnonymizingFormatter

new_anonymizer = Anonymizer.from_data_types

__all__ = [
    "Anonymizer",
    "AnonymizingWriter",
    "AnonymizingFormatter",
    "DetectorRuleI",
    "DataType",
    "data_type_from_string",
    "new_anonymizer",
    "get_default_anonymizer",
    "set_salt",
    "hide",
    "anonymize",
    "anonymize_payload",
    "writer",
    "LogAnonError",
    "UnknownDataTypeError",
    "InvalidPatternError",
]
