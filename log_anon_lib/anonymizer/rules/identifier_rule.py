"""
Rules that anonymize personal and device identifiers.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class SsnRule(CatalogRule):
    """
    Detects US Social Security Numbers (``123-45-6789``, ``123 45 6789`` or
    ``123456789``) and replaces them with ``SSN:<token>``.
    """

    TAG = "SSN"
    REGEX = r"\d{3}[- ]?\d{2}[- ]?\d{4}"


class ImeiRule(CatalogRule):
    """
    Detects IMEI/MEID device identifiers and replaces them with
    ``IMEI:<token>``.

    The 14‑hex‑digit form must end the text, the 15‑digit form must be the
    whole text and the 18‑digit form must start it.  ``$`` is the very end of
    the text: a trailing newline prevents a match.
    """

    TAG = "IMEI"
    REGEX = r"[0-9a-f]{14}$|^\d{15}$|^\d{18}"


class ImsiRule(CatalogRule):
    """Detects 14‑15 digit IMSI subscriber identities (``IMSI:<token>``)."""

    TAG = "IMSI"
    REGEX = r"\d{14,15}"
