"""
Rules that anonymize UUIDs (lowercase hexadecimal, canonical 8‑4‑4‑4‑12 form).
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class Uuid3Rule(CatalogRule):
    """Name‑based (MD5) UUIDs, replaced with ``UUID3:<token>``."""

    TAG = "UUID3"
    REGEX = r"[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}"


class Uuid4Rule(CatalogRule):
    """Random UUIDs, replaced with ``UUID4:<token>``."""

    TAG = "UUID4"
    REGEX = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"


class Uuid5Rule(CatalogRule):
    """Name‑based (SHA‑1) UUIDs, replaced with ``UUID5:<token>``."""

    TAG = "UUID5"
    REGEX = r"[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"


class UuidRule(CatalogRule):
    """Any UUID regardless of version, replaced with ``UUID:<token>``."""

    TAG = "UUID"
    REGEX = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
