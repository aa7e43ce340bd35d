"""
Definition of the rule interface that every detector rule must implement.
"""

from abc import ABC, abstractmethod
from typing import Callable


class DetectorRuleI(ABC):
    """
    Abstract base class for all detector rules.

    A detector pairs a short *tag* (e.g. ``"IP"``) with a way of finding the
    sensitive substrings it is responsible for.  Sub‑classes must implement
    :meth:`matches` (used for whole‑value hiding) and :meth:`apply` (used for
    in‑text substitution).  Implementations must not keep per‑call state so
    that a single rule can be shared between threads.
    """

    tag: str

    @abstractmethod
    def matches(self, text: str) -> bool:
        """
        Tell whether the rule finds its content type anywhere in *text*.

        Parameters
        ----------
        text: str
            The input text to be checked.

        Returns
        -------
        bool
            ``True`` when at least one match exists.
        """
        raise NotImplementedError

    @abstractmethod
    def apply(self, text: str, tokenize: Callable[[str], str]) -> str:
        """
        Replace every match in *text* with ``"<tag>:" + tokenize(match)``.

        Parameters
        ----------
        text: str
            The input text to be processed.
        tokenize: Callable[[str], str]
            Turns a matched substring into its encoded digest.

        Returns
        -------
        str
            The text after the rule has been applied.
        """
        raise NotImplementedError
