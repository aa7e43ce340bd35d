"""
Package that contains concrete detector rule implementations.
"""

from log_anon_lib.anonymizer.rules.base_rule import BaseRule, CatalogRule, CustomRule
from log_anon_lib.anonymizer.rules.email_rule import EmailRule
from log_anon_lib.anonymizer.rules.credit_card_rule import CreditCardRule
from log_anon_lib.anonymizer.rules.uuid_rule import (
    Uuid3Rule,
    Uuid4Rule,
    Uuid5Rule,
    UuidRule,
)
from log_anon_lib.anonymizer.rules.geo_rule import LatitudeRule, LongitudeRule
from log_anon_lib.anonymizer.rules.ip_rule import IpRule, Ip6Rule
from log_anon_lib.anonymizer.rules.dns_rule import DnsNameRule, DomainRule
from log_anon_lib.anonymizer.rules.url_rule import UrlRule
from log_anon_lib.anonymizer.rules.identifier_rule import SsnRule, ImeiRule, ImsiRule
from log_anon_lib.anonymizer.rules.phone_rule import E164Rule
