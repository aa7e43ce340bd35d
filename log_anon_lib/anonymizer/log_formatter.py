"""
Logging integration.

:class:`AnonymizingFormatter` anonymizes the fully formatted record, so the
message, its ``%`` arguments and any exception traceback are all covered::

    handler = logging.StreamHandler()
    handler.setFormatter(AnonymizingFormatter(fmt="%(levelname)s %(message)s"))
"""

import logging
from typing import Optional

from log_anon_lib.anonymizer.core.anonymizer import Anonymizer
from log_anon_lib.anonymizer.core.default import get_default_anonymizer


class AnonymizingFormatter(logging.Formatter):
    """
    :class:`logging.Formatter` that runs :meth:`Anonymizer.anonymize` over
    its output.

    Parameters
    ----------
    anonymizer : Anonymizer | None
        Engine to use; the process‑wide default anonymizer when ``None``.
    *args, **kwargs
        Passed to :class:`logging.Formatter`.
    """

    def __init__(self, *args, anonymizer: Optional[Anonymizer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._anonymizer = anonymizer

    @property
    def anonymizer(self) -> Anonymizer:
        if self._anonymizer is None:
            return get_default_anonymizer()
        return self._anonymizer

    def format(self, record: logging.LogRecord) -> str:
        return self.anonymizer.anonymize(super().format(record))
