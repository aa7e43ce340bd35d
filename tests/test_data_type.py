import json

import pytest

from log_anon_lib import DataType, UnknownDataTypeError, data_type_from_string
from log_anon_lib.anonymizer.data_type import data_types_from_strings, rule_for
from log_anon_lib.anonymizer.rules import IpRule, DnsNameRule

ALL_NAMES = [
    "Email",
    "CreditCard",
    "UUID3",
    "UUID4",
    "UUID5",
    "UUID",
    "Latitude",
    "Longitude",
    "IP4",
    "IP6",
    "DNSName",
    "URL",
    "SSN",
    "IMEI",
    "IMSI",
    "E164",
]


def test_catalog_order_and_names():
    assert [t.value for t in DataType] == ALL_NAMES


@pytest.mark.parametrize("name", ALL_NAMES)
def test_from_string_round_trip(name):
    data_type = DataType.from_string(name)
    assert str(data_type) == name
    assert data_type_from_string(name) is data_type


@pytest.mark.parametrize("name", ["NotARealType", "email", "ip4", " IP4", ""])
def test_unknown_name(name):
    with pytest.raises(UnknownDataTypeError) as exc_info:
        DataType.from_string(name)
    assert exc_info.value.name == name
    assert str(exc_info.value) == f"unknown data type: {name}"


def test_tags():
    assert DataType.IP4.tag == "IP"
    assert DataType.IP6.tag == "IP6"
    assert DataType.DNS_NAME.tag == "DNS"
    assert DataType.LATITUDE.tag == "Latitude"
    assert DataType.E164.tag == "E164"
    assert DataType.EMAIL.tag == "Email"


def test_rule_for_builds_catalog_rule():
    rule = rule_for("IP4")
    assert isinstance(rule, IpRule)
    assert rule.pattern == DataType.IP4.pattern
    assert isinstance(rule_for(DataType.DNS_NAME), DnsNameRule)


def test_parse_list_keeps_order():
    parsed = data_types_from_strings(["IP6", DataType.EMAIL, "IP4"])
    assert parsed == [DataType.IP6, DataType.EMAIL, DataType.IP4]


def test_serializes_as_name():
    assert json.dumps([DataType.IP4, DataType.DNS_NAME]) == '["IP4", "DNSName"]'
