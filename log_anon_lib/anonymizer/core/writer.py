"""
File-like adapter that anonymizes everything written through it.
"""

from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from log_anon_lib.anonymizer.core.anonymizer import Anonymizer

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class AnonymizingWriter:
    """
    Forward every :meth:`write` to *sink* after passing it through
    :meth:`Anonymizer.anonymize`.

    Each call is processed on its own – nothing is buffered between calls,
    so a value split across two writes (``"192.168."`` then ``"10.25"``) is
    **not** detected.  Loggers write whole records at once, which is the
    intended use::

        handler = logging.StreamHandler(anonymizer.writer(sys.stderr))

    Parameters
    ----------
    anonymizer : Anonymizer
        Configured engine used for every write.
    sink : Any
        Object with a ``write`` method accepting ``str`` (text sinks) or
        ``bytes`` (binary sinks); the type written matches the type given.
    """

    def __init__(self, anonymizer: "Anonymizer", sink: Any):
        self._anonymizer = anonymizer
        self._sink = sink

    def write(self, data: Union[str, bytes, bytearray, memoryview]):
        if isinstance(data, str):
            return self._sink.write(self._anonymizer.anonymize(data))
        text = bytes(data).decode(_ENCODING, _ERRORS)
        return self._sink.write(
            self._anonymizer.anonymize(text).encode(_ENCODING, _ERRORS)
        )

    def writelines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()

    def writable(self) -> bool:
        return True
