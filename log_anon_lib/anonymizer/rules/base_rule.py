"""
Regular-expression based detector rules shared by all concrete rules.

Built-in (catalog) rules are compiled with RE2, which matches in time linear
in the length of the scanned text; RE2 also gives ``\\d`` its ASCII meaning
and ``$`` its end-of-text meaning.  Caller defined rules are compiled with
:mod:`re` so that ``re`` flags and precompiled patterns keep working.
"""

import re
from typing import Callable, Optional, Pattern, Union

import re2

from log_anon_lib.constants import TAG_SEPARATOR
from log_anon_lib.exceptions import InvalidPatternError
from log_anon_lib.anonymizer.core.rule_interface import DetectorRuleI

# Runs of lone surrogates (e.g. bytes kept by the "surrogateescape" handler);
# they are not valid UTF-8 and cannot be handed to RE2
_SURROGATES = re.compile("([%s-%s]+)" % (chr(0xD800), chr(0xDFFF)))


class BaseRule(DetectorRuleI):
    """
    Detector rule backed by a single compiled regular expression.

    Parameters
    ----------
    tag: str
        Prefix placed in front of every token produced by this rule.
    regex:
        Compiled pattern (``re`` or ``re2``) with ``search`` and ``sub``.
    """

    def __init__(self, tag: str, regex):
        self.tag = tag
        self._regex = regex

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def matches(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def apply(self, text: str, tokenize: Callable[[str], str]) -> str:
        def replacer(match) -> str:
            return self.tag + TAG_SEPARATOR + tokenize(match.group(0))

        return self._regex.sub(replacer, text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, regex={self.pattern!r})"


class CatalogRule(BaseRule):
    """
    Built-in detector; subclasses set ``TAG`` and ``REGEX``.

    The pattern is compiled with RE2 when the rule is created.  Text that
    holds lone surrogates is scanned piece by piece around them, so such a
    code point always ends a match.
    """

    TAG: str = ""
    REGEX: str = ""

    def __init__(self, regex: Optional[str] = None):
        regex = self.REGEX if regex is None else regex
        try:
            compiled = re2.compile(regex)
        except re2.error as e:
            raise InvalidPatternError(self.TAG, regex, str(e)) from e
        super().__init__(tag=self.TAG, regex=compiled)

    def matches(self, text: str) -> bool:
        return any(
            self._regex.search(part) is not None
            for part in _SURROGATES.split(text)[::2]
        )

    def apply(self, text: str, tokenize: Callable[[str], str]) -> str:
        parts = _SURROGATES.split(text)
        for i in range(0, len(parts), 2):
            parts[i] = super().apply(parts[i], tokenize)
        return "".join(parts)


class CustomRule(BaseRule):
    """
    Caller defined detector, e.g. ``CustomRule("hidden", r"hide\\(.+\\)")``.

    Compiled with :mod:`re`; matching time depends on the given pattern.

    Raises
    ------
    InvalidPatternError
        If *regex* does not compile.
    """

    def __init__(self, tag: str, regex: Union[str, Pattern], flags: int = 0):
        if isinstance(regex, re.Pattern):
            compiled = regex
        else:
            try:
                compiled = re.compile(regex, flags)
            except re.error as e:
                raise InvalidPatternError(tag, regex, str(e)) from e
        super().__init__(tag=tag, regex=compiled)
