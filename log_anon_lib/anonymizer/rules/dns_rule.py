"""
Rules that anonymize DNS names.
"""

import re

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule

# One or more labels, each followed by a dot
SUBDOMAIN_REGEX = r"([a-zA-Z0-9_]{1}[a-zA-Z0-9_-]{0,62}\.)+"


class DnsNameRule(CatalogRule):
    """
    Detects host names made of at least two labels (``yahoo.com``, not a
    bare ``yahoo``) and replaces them with ``DNS:<token>``.
    """

    TAG = "DNS"

    REGEX = (
        r"([a-zA-Z0-9_]{1}[a-zA-Z0-9_-]{0,62}){1}"
        r"(\.[a-zA-Z0-9_]{1}[a-zA-Z0-9_-]{0,62})+"
        r"[\._]?"
    )


class DomainRule(CatalogRule):
    """
    Detects names under one given top‑level domain, e.g. ``tiger.local`` for
    ``DomainRule("local")``, and replaces them with ``DNS:<token>``.

    Parameters
    ----------
    tld: str
        Top‑level domain, matched literally (without a leading dot).
    """

    TAG = DnsNameRule.TAG

    def __init__(self, tld: str):
        self.tld = tld
        super().__init__(regex=SUBDOMAIN_REGEX + re.escape(tld))
