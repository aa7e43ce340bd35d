"""
Catalog of the built-in data types.

Every :class:`DataType` member names one detector rule.  Members are looked
up by their exact, case-sensitive name, which is also how they are written in
JSON/YAML configuration files::

    data_types: [Email, IP4, IP6]
"""

from enum import Enum
from typing import Dict, List, Type, Union

from log_anon_lib.exceptions import UnknownDataTypeError
from log_anon_lib.anonymizer.rules import (
    CatalogRule,
    EmailRule,
    CreditCardRule,
    Uuid3Rule,
    Uuid4Rule,
    Uuid5Rule,
    UuidRule,
    LatitudeRule,
    LongitudeRule,
    IpRule,
    Ip6Rule,
    DnsNameRule,
    UrlRule,
    SsnRule,
    ImeiRule,
    ImsiRule,
    E164Rule,
)


class DataType(str, Enum):
    EMAIL = "Email"
    CREDIT_CARD = "CreditCard"
    UUID3 = "UUID3"
    UUID4 = "UUID4"
    UUID5 = "UUID5"
    UUID = "UUID"
    LATITUDE = "Latitude"
    LONGITUDE = "Longitude"
    IP4 = "IP4"
    IP6 = "IP6"
    DNS_NAME = "DNSName"
    URL = "URL"
    SSN = "SSN"
    IMEI = "IMEI"
    IMSI = "IMSI"
    E164 = "E164"

    def __str__(self) -> str:
        return self.value

    @property
    def rule_class(self) -> Type[CatalogRule]:
        return _CATALOG[self]

    @property
    def tag(self) -> str:
        return self.rule_class.TAG

    @property
    def pattern(self) -> str:
        return self.rule_class.REGEX

    @classmethod
    def from_string(cls, name: str) -> "DataType":
        """
        Return the member called *name*.

        Raises
        ------
        UnknownDataTypeError
            If *name* is not an exact catalog name.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownDataTypeError(name) from None


_CATALOG: Dict[DataType, Type[CatalogRule]] = {
    DataType.EMAIL: EmailRule,
    DataType.CREDIT_CARD: CreditCardRule,
    DataType.UUID3: Uuid3Rule,
    DataType.UUID4: Uuid4Rule,
    DataType.UUID5: Uuid5Rule,
    DataType.UUID: UuidRule,
    DataType.LATITUDE: LatitudeRule,
    DataType.LONGITUDE: LongitudeRule,
    DataType.IP4: IpRule,
    DataType.IP6: Ip6Rule,
    DataType.DNS_NAME: DnsNameRule,
    DataType.URL: UrlRule,
    DataType.SSN: SsnRule,
    DataType.IMEI: ImeiRule,
    DataType.IMSI: ImsiRule,
    DataType.E164: E164Rule,
}


def data_type_from_string(name: Union[str, DataType]) -> DataType:
    if isinstance(name, DataType):
        return name
    return DataType.from_string(name)


def data_types_from_strings(names: List[Union[str, DataType]]) -> List[DataType]:
    """Parse all *names*, keeping their order."""
    return [data_type_from_string(n) for n in names]


def rule_for(data_type: Union[str, DataType]) -> CatalogRule:
    """Build a fresh rule instance for one catalog entry."""
    return data_type_from_string(data_type).rule_class()
