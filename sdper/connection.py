"""Connection data (``c=``) and the address shapes shared with ``o=``.

An address is either an IP literal, whose type follows from its version,
or a domain name carrying an explicit IP4/IP6 tag. Domains are never
resolved, so the tag is taken on trust.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Union

from .exceptions import AddressErrorReason, InvalidAddressError

NETWORK_TYPE = "IN"

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AddressType(StrEnum):
    IP4 = "IP4"
    IP6 = "IP6"

    @classmethod
    def parse(cls, token: str) -> "AddressType":
        try:
            return cls(token)
        except ValueError as exc:
            raise InvalidAddressError(AddressErrorReason.UNKNOWN_ADDRTYPE, token) from exc


def _parse_ip(text: str) -> IPAddress:
    try:
        return ipaddress.ip_address(text)
    except ValueError as exc:
        raise InvalidAddressError(AddressErrorReason.MALFORMED, text) from exc


@dataclass(frozen=True)
class IpAddress:
    """IP literal; ``text`` keeps the spelling it was built from."""

    ip: IPAddress
    text: str = field(default="", compare=False, repr=False)

    def __post_init__(self):
        if isinstance(self.ip, str):
            if not self.text:
                object.__setattr__(self, "text", self.ip)
            object.__setattr__(self, "ip", _parse_ip(self.ip))
        if not self.text:
            object.__setattr__(self, "text", str(self.ip))
        elif _parse_ip(self.text) != self.ip:
            raise InvalidAddressError(AddressErrorReason.MALFORMED, self.text)

    @property
    def address_type(self) -> AddressType:
        return AddressType.IP4 if self.ip.version == 4 else AddressType.IP6

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FqdnAddress:
    addrtype: AddressType
    domain: str

    def __post_init__(self):
        if not self.domain:
            raise InvalidAddressError(AddressErrorReason.EMPTY, self.domain)
        if any(ch.isspace() for ch in self.domain):
            raise InvalidAddressError(AddressErrorReason.MALFORMED, self.domain)
        object.__setattr__(self, "addrtype", AddressType.parse(self.addrtype))

    @property
    def address_type(self) -> AddressType:
        return self.addrtype

    def __str__(self) -> str:
        return self.domain


Address = Union[IpAddress, FqdnAddress]


def parse_address(addrtype: str, text: str) -> Address:
    """Build an address from its ``<addrtype> <address>`` tokens.

    IP literals must agree with the declared type; anything that is not an
    IP literal (domain names, multicast ``/ttl`` forms) is kept as a domain.
    """
    kind = AddressType.parse(addrtype)
    if not text:
        raise InvalidAddressError(AddressErrorReason.EMPTY, text)
    try:
        ip = ipaddress.ip_address(text)
    except ValueError:
        return FqdnAddress(kind, text)
    address = IpAddress(ip, text)
    if address.address_type is not kind:
        raise InvalidAddressError(AddressErrorReason.ADDRTYPE_MISMATCH, f"{addrtype} {text}")
    return address


def format_address(address: Address) -> str:
    """``IN <addrtype> <address>``"""
    return f"{NETWORK_TYPE} {address.address_type} {address}"


def parse_full_address(text: str) -> Address:
    """Parse ``IN <addrtype> <address>``."""
    parts = text.split(" ")
    if len(parts) != 3:
        raise InvalidAddressError(AddressErrorReason.MALFORMED, text)
    nettype, addrtype, address = parts
    if nettype != NETWORK_TYPE:
        raise InvalidAddressError(AddressErrorReason.UNKNOWN_NETTYPE, nettype)
    return parse_address(addrtype, address)


@dataclass(frozen=True)
class Connection:
    """``c=<nettype> <addrtype> <connection-address>``"""

    address: Address

    @property
    def address_type(self) -> AddressType:
        return self.address.address_type

    @classmethod
    def parse(cls, text: str) -> "Connection":
        return cls(parse_full_address(text))

    def __str__(self) -> str:
        return format_address(self.address)
