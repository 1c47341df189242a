"""
Parsing and validation of addr-spec email addresses.

An address is split on its last '@'; the local-part before it is either a
dot-atom or a quoted string, and the domain after it is either a dot-atom or a
domain literal. Folding white space, comments and the obsolete forms aren't
supported.
"""

import logging
from typing import Any, Optional, Tuple

from netaddr import IPAddress, INET_PTON, valid_ipv4, valid_ipv6  # type: ignore

from addrspec.charclass import is_uchar
from addrspec.errors import (
    AddressError,
    DomainEmpty,
    DomainTooLong,
    InvalidCharacter,
    InvalidIPAddress,
    LocalPartEmpty,
    LocalPartTooLong,
    MissingSeparator,
    SubDomainTooLong,
)
from addrspec.tokens import DOT, is_dot_atom_text, is_dtext, is_qcontent

LOCAL_PART_MAX_LENGTH = 64
DOMAIN_MAX_LENGTH = 254  # RFC3696 erratum 1690
SUB_DOMAIN_MAX_LENGTH = 63

AT = "@"
DQUOTE = '"'
LBRACKET = "["
RBRACKET = "]"
LT = "<"
GT = ">"
IPV6_TAG = "ipv6:"

log = logging.getLogger(__name__)


def parse_address(address: str) -> Tuple[str, str]:
    """
    Split address into its local-part and domain, validating both.

    Returns the two as they appear in address, quotes and brackets included.
    Raises an AddressError for the first problem found.
    """
    if address.startswith(LT) and address.endswith(GT):
        address = address[1:-1]
    # the domain can't contain '@', but a quoted local-part can
    local, sep, domain = address.rpartition(AT)
    try:
        if not sep:
            raise MissingSeparator()
        parse_local_part(local)
        parse_domain(domain)
    except AddressError as why:
        log.debug("Rejected %r: %s", address, why)
        raise
    return local, domain


def parse_local_part(part: str) -> None:
    """
    Validate part as a local-part. Raises an AddressError if it isn't one.
    """
    if not part:
        raise LocalPartEmpty()
    if len(part) > LOCAL_PART_MAX_LENGTH:
        raise LocalPartTooLong(length=len(part), limit=LOCAL_PART_MAX_LENGTH)
    if len(part) > 1 and part[0] == part[-1] == DQUOTE:
        if len(part) == 2:
            raise LocalPartEmpty()
        if not is_qcontent(part[1:-1]):
            raise InvalidCharacter()
    elif not is_dot_atom_text(part):
        raise InvalidCharacter()


def parse_domain(part: str) -> None:
    """
    Validate part as a domain. Raises an AddressError if it isn't one.

    Domain literals are only checked for dtext; see EmailAddress.ip_address.
    """
    if not part:
        raise DomainEmpty()
    if len(part) > DOMAIN_MAX_LENGTH:
        raise DomainTooLong(length=len(part), limit=DOMAIN_MAX_LENGTH)
    if part.startswith(LBRACKET) and part.endswith(RBRACKET):
        if not is_dtext(part[1:-1]):
            raise InvalidCharacter()
        return
    if not is_dot_atom_text(part):
        raise InvalidCharacter()
    for label in part.split(DOT):
        if len(label) > SUB_DOMAIN_MAX_LENGTH:
            raise SubDomainTooLong(
                label=label, length=len(label), limit=SUB_DOMAIN_MAX_LENGTH
            )


class EmailAddress:
    """
    A validated email address.

    Constructing one parses the address, raising an AddressError if it isn't
    valid. Instances are immutable, and compare and hash on their local-part
    and domain.
    """

    __slots__ = ("local", "domain")

    local: str
    domain: str

    def __init__(self, address: str) -> None:
        local, domain = parse_address(address)
        object.__setattr__(self, "local", local)
        object.__setattr__(self, "domain", domain)

    @classmethod
    def from_string(cls, address: str) -> "EmailAddress":
        return cls(address)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return (self.local, self.domain) == (other.local, other.domain)

    def __hash__(self) -> int:
        return hash((self.local, self.domain))

    def __repr__(self) -> str:
        return f"EmailAddress(local={self.local!r}, domain={self.domain!r})"

    def __str__(self) -> str:
        return f"{self.local}{AT}{self.domain}"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (self.__class__, (str(self),))

    @property
    def is_quoted(self) -> bool:
        "Whether the local-part is a quoted string."
        return self.local.startswith(DQUOTE)

    @property
    def is_literal(self) -> bool:
        "Whether the domain is a domain literal."
        return self.domain.startswith(LBRACKET)

    @property
    def requires_smtputf8(self) -> bool:
        "Whether the address needs the SMTPUTF8 extension (RFC6531) to be sent."
        return any(is_uchar(char) for char in str(self))

    @property
    def ip_address(self) -> Optional[IPAddress]:
        """
        The IP address that a domain literal denotes; None for domain names.

        Raises InvalidIPAddress if the literal isn't an IPv4 address or an
        "IPv6:"-tagged IPv6 address.
        """
        if not self.is_literal:
            return None
        literal = self.domain[1:-1]
        # netaddr refuses to consider empty strings at all
        if literal[: len(IPV6_TAG)].lower() == IPV6_TAG:
            candidate = literal[len(IPV6_TAG) :]
            if candidate and valid_ipv6(candidate):
                return IPAddress(candidate, version=6)
        elif literal and valid_ipv4(literal, flags=INET_PTON):
            return IPAddress(literal, version=4, flags=INET_PTON)
        raise InvalidIPAddress(literal=self.domain)

    def to_uri(self) -> str:
        from addrspec.format import to_uri  # pylint: disable=cyclic-import

        return to_uri(self)

    def to_display(self, display_name: str) -> str:
        from addrspec.format import to_display  # pylint: disable=cyclic-import

        return to_display(self, display_name)

    @staticmethod
    def is_valid(address: str) -> bool:
        return is_valid(address)

    @staticmethod
    def is_valid_local_part(part: str) -> bool:
        return is_valid_local_part(part)

    @staticmethod
    def is_valid_domain(part: str) -> bool:
        return is_valid_domain(part)


def validate(address: str) -> EmailAddress:
    """
    Parse address into an EmailAddress. Raises an AddressError for the first
    problem found.
    """
    return EmailAddress(address)


def is_valid(address: str) -> bool:
    try:
        parse_address(address)
    except AddressError:
        return False
    return True


def is_valid_local_part(part: str) -> bool:
    try:
        parse_local_part(part)
    except AddressError:
        return False
    return True


def is_valid_domain(part: str) -> bool:
    try:
        parse_domain(part)
    except AddressError:
        return False
    return True
