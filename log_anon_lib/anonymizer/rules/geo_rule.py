"""
Rules that anonymize geographic coordinates.

Both patterns are very permissive: any standalone digit is a valid latitude
and a valid longitude.  Register them after the more specific rules.
"""

from log_anon_lib.anonymizer.rules.base_rule import CatalogRule


class LatitudeRule(CatalogRule):
    """Decimal latitude in ``[-90, 90]``, replaced with ``Latitude:<token>``."""

    TAG = "Latitude"
    REGEX = r"[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)"


class LongitudeRule(CatalogRule):
    """Decimal longitude in ``[-180, 180]``, replaced with ``Longitude:<token>``."""

    TAG = "Longitude"
    REGEX = r"[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)"
