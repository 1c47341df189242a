"""
Formatting a validated EmailAddress for use elsewhere.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from addrspec.address import EmailAddress  # pylint: disable=cyclic-import

MAILTO_URI_PREFIX = "mailto:"

uri_gen_delims = r":/?#[]@"  # pylint: disable=invalid-name
uri_sub_delims = r"!$&'()*+,;="  # pylint: disable=invalid-name

# everything reserved in a URI, and the escape character itself
_URI_ESCAPES = {ord(c): f"%{ord(c):02X}" for c in uri_gen_delims + uri_sub_delims + "%"}


def uri_escape(instr: str) -> str:
    """
    Percent-encode the URI-reserved characters in instr. Everything else,
    including non-ASCII, is left alone.
    """
    return instr.translate(_URI_ESCAPES)


def to_canonical_string(addr: "EmailAddress") -> str:
    "The local-part and domain, joined with '@'."
    return f"{addr.local}@{addr.domain}"


def to_uri(addr: "EmailAddress") -> str:
    """
    A mailto: URI for addr; e.g., name@example.org becomes
    mailto:name%40example.org.
    """
    return MAILTO_URI_PREFIX + uri_escape(to_canonical_string(addr))


def to_display(addr: "EmailAddress", display_name: str) -> str:
    """
    addr with a display name, as used in message headers; e.g.,
    "My Name <name@example.org>". display_name is not quoted or escaped.
    """
    return f"{display_name} <{to_canonical_string(addr)}>"
