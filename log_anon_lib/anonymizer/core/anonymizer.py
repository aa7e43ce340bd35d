"""
Anonymizer module
=================

Provides the :class:`Anonymizer` class – the engine that applies an ordered
sequence of :class:`~log_anon_lib.anonymizer.core.rule_interface.DetectorRuleI`
implementations to text.  Every detected value is replaced with
``"<tag>:<token>"`` where *token* is the encoded salted digest of the value.
Equal values get equal tokens for as long as the salt is unchanged, so
anonymized log lines can still be correlated.

The public API supports:

* Whole‑value hiding via :meth:`Anonymizer.hide`.
* Plain‑text anonymisation via :meth:`Anonymizer.anonymize`.
* Recursive anonymisation of complex data structures (``dict``, ``list`` and
  nested combinations) via :meth:`Anonymizer.anonymize_payload`.
* A file‑like adapter via :meth:`Anonymizer.writer`.

Configure an instance completely (salt and rules) before sharing it between
threads; ``hide`` and ``anonymize`` never modify the instance.
"""

import logging
from typing import List, Any, Optional, Pattern, Tuple, Union

from log_anon_lib.constants import TAG_SEPARATOR
from log_anon_lib.utils.digest import random_salt, hash_and_encode
from log_anon_lib.anonymizer.core.rule_interface import DetectorRuleI
from log_anon_lib.anonymizer.core.writer import AnonymizingWriter
from log_anon_lib.anonymizer.data_type import DataType, data_types_from_strings
from log_anon_lib.anonymizer.rules import CustomRule, DomainRule


class Anonymizer:
    """
    Orchestrates the application of a list of detector rules.

    The class holds an ordered collection of objects implementing the
    :class:`DetectorRuleI` interface.  Order matters twice: :meth:`hide` tags
    a value with the *first* matching rule, and :meth:`anonymize` runs the
    rules one after another, each over the output of the previous one.  A
    later rule may therefore match inside a token produced by an earlier one
    (e.g. digits in a token picked up by a number-like rule).

    Attributes
    ----------
    rules : Tuple[DetectorRuleI, ...]
        Snapshot of the active rules, in precedence order.
    salt : bytes
        The secret mixed into every digest.
    """

    def __init__(
        self,
        rules: Optional[List[DetectorRuleI]] = None,
        salt: Optional[Union[bytes, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise the anonymizer.

        Parameters
        ----------
        rules : List[DetectorRuleI] | None
            An ordered collection of rule objects.  ``None`` means no rules;
            values passed to :meth:`hide` are still tokenized, untagged.
        salt : bytes | str | None
            Salt for the digest.  ``None`` (the default) generates a random
            salt, so tokens differ between runs.
        logger : logging.Logger | None
            Logger for configuration events; defaults to the module logger.
        """
        self.logger = logger or logging.getLogger(__name__)
        self._rules: Tuple[DetectorRuleI, ...] = tuple(rules or ())
        self._salt = random_salt() if salt is None else _as_bytes(salt)

    @classmethod
    def from_data_types(
        cls,
        *data_types: Union[str, DataType],
        salt: Optional[Union[bytes, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "Anonymizer":
        """
        Build an anonymizer with one catalog rule per data type, in the
        given order.

        Raises
        ------
        UnknownDataTypeError
            If any name is not in the catalog.  No anonymizer is created.
        """
        parsed = data_types_from_strings(list(data_types))
        return cls(
            rules=[t.rule_class() for t in parsed], salt=salt, logger=logger
        )

    # ------------------------------------------------------------------ #
    @property
    def rules(self) -> Tuple[DetectorRuleI, ...]:
        return self._rules

    @property
    def salt(self) -> bytes:
        return self._salt

    def set_salt(self, salt: Union[bytes, str]) -> "Anonymizer":
        """Replace the salt; every token produced afterwards changes."""
        self._salt = _as_bytes(salt)
        self.logger.debug("Salt replaced (%d bytes)", len(self._salt))
        return self

    def add_rule(self, rule: DetectorRuleI) -> "Anonymizer":
        """Append *rule* with the lowest precedence."""
        self._rules = self._rules + (rule,)
        self.logger.debug(
            "Registered rule %r with tag %r", type(rule).__name__, rule.tag
        )
        return self

    def add_custom_rule(
        self, tag: str, regex: Union[str, Pattern], flags: int = 0
    ) -> "Anonymizer":
        """
        Append a caller defined rule.

        Raises
        ------
        InvalidPatternError
            If *regex* does not compile.
        """
        return self.add_rule(CustomRule(tag=tag, regex=regex, flags=flags))

    def add_domains(self, *tlds: str) -> "Anonymizer":
        """Append one ``DNS`` rule per top‑level domain in *tlds*."""
        for tld in tlds:
            self.add_rule(DomainRule(tld))
        return self

    # ------------------------------------------------------------------ #
    def hide(self, value: Any) -> str:
        """
        Anonymize *value* as a whole.

        The value is formatted with ``str`` and tokenized.  The token is
        prefixed with the tag of the first rule that matches anywhere in the
        formatted value; with no matching rule the bare token is returned.
        """
        text = value if isinstance(value, str) else str(value)
        token = _tokenize(self._salt, text)
        for rule in self._rules:
            if rule.matches(text):
                return rule.tag + TAG_SEPARATOR + token
        return token

    def anonymize(self, text: str) -> str:
        """
        Replace every match of every rule in *text*.

        Parameters
        ----------
        text: str
            The original text.

        Returns
        -------
        str
            The fully anonymized text.
        """
        return self._anonymize_text(text=text)

    def anonymize_payload(self, payload: Any) -> Any:
        """
        Anonymize every string inside a JSON-like *payload*.

        Strings are passed through :meth:`anonymize`; dictionaries (keys and
        values) and lists are rebuilt with their items anonymized, at any
        depth.  Numbers, ``None`` and other objects are returned as they are,
        so ``{"port": 22}`` keeps its integer.  All strings of one call are
        tokenized with the same salt.

        Parameters
        ----------
        payload : Any
            Typically the result of ``json.loads``.

        Returns
        -------
        Any
            A new structure; *payload* itself is left unchanged.
        """
        return self._anonymize_item(payload, self._salt)

    def tokenize(self, text: str) -> str:
        """Encoded salted digest of *text*, without any tag."""
        return _tokenize(self._salt, text)

    def writer(self, sink) -> AnonymizingWriter:
        """Wrap *sink* so that everything written to it is anonymized first."""
        return AnonymizingWriter(anonymizer=self, sink=sink)

    # ------------------------------------------------------------------ #
    def _anonymize_text(self, text: str, salt: Optional[bytes] = None) -> str:
        if salt is None:
            salt = self._salt

        def tokenize(value: str) -> str:
            return _tokenize(salt, value)

        for rule in self._rules:
            text = rule.apply(text, tokenize)
        return text

    def _anonymize_item(self, item: Any, salt: bytes) -> Any:
        if isinstance(item, str):
            return self._anonymize_text(item, salt)
        if isinstance(item, dict):
            return {
                self._anonymize_item(k, salt): self._anonymize_item(v, salt)
                for k, v in item.items()
            }
        if isinstance(item, list):
            return [self._anonymize_item(e, salt) for e in item]
        return item


def _tokenize(salt: bytes, text: str) -> str:
    return hash_and_encode(salt, text.encode("utf-8", "surrogateescape"))


def _as_bytes(salt: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(salt, str):
        return salt.encode("utf-8")
    return bytes(salt)
