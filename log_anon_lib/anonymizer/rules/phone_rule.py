"""
Rule that anonymizes phone numbers.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class E164Rule(CatalogRule):
    """
    Detects E.164 international numbers (optional ``+``, up to 15 digits, no
    leading zero) and replaces them with ``E164:<token>``.

    Any run of two or more digits qualifies, so this rule should be
    registered last.
    """

    TAG = "E164"
    REGEX = r"\+?[1-9]\d{1,14}"
