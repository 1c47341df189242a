"""
The reasons an address can be rejected.

Exactly one of these is raised for a failed validation: the first problem
found. They form a closed set (ALL_ERRORS); some are reserved, in that no
validator raises them today.

The summary is plain text and is escaped when shown as HTML. The longer text
is Markdown; variables interpolated into it are escaped first.
"""

from typing import Any, Dict, List, Tuple, Type, Union

from markdown import markdown
from markupsafe import Markup, escape


class AddressError(ValueError):
    """
    Base class for address syntax errors.
    """

    summary = ""
    text = ""
    reserved = False

    def __init__(self, **vrs: Union[str, int]) -> None:
        self.vars: Dict[str, Union[str, int]] = vrs
        ValueError.__init__(self, self.summary % self.vars)

    def __eq__(self, other: Any) -> bool:
        return bool(self.__class__ == other.__class__ and self.vars == other.vars)

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.vars!r})"

    # args holds the rendered summary, which __init__ doesn't take
    def __reduce__(self) -> Tuple[Any, ...]:
        return (_rebuild_error, (self.__class__, self.vars))

    def show_summary(self) -> Markup:
        """
        Output a one-line summary of the error, escaped for HTML.
        """
        return escape(self.summary % self.vars)

    def show_text(self) -> Markup:
        """
        Show the HTML text for the error.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


def _rebuild_error(
    cls: Type[AddressError], vrs: Dict[str, Union[str, int]]
) -> AddressError:
    return cls(**vrs)


class InvalidCharacter(AddressError):
    summary = "Invalid character."
    text = """\
A character in the address isn't allowed where it appears.

Outside of quotes, the local-part and the domain are made of _atoms_ (letters, digits, any
non-ASCII character and the punctuation ``!#$%%&'*+-/=?^_`{|}~``) joined by single dots; an
address can't start or end with a dot, or have two dots in a row. Spaces, quotes, backslashes
and other special characters are only allowed inside a quoted local-part, and a backslash there
must escape a visible ASCII character."""


class MissingSeparator(AddressError):
    summary = "Missing separator character '@'."
    text = """\
An address is a local-part and a domain separated by `@`; this one has no `@` at all."""


class LocalPartEmpty(AddressError):
    summary = "Local part is empty."
    text = """\
Nothing comes before the `@`, or the local-part is an empty pair of quotes (`""`)."""


class LocalPartTooLong(AddressError):
    summary = "Local part is too long. Length limit: %(limit)s"
    text = """\
The local-part is %(length)s characters long; [RFC5321](https://tools.ietf.org/html/rfc5321#section-4.5.3.1.1)
limits it to %(limit)s."""


class DomainEmpty(AddressError):
    summary = "Domain is empty."
    text = """\
Nothing follows the `@`."""


class DomainTooLong(AddressError):
    summary = "Domain is too long. Length limit: %(limit)s"
    text = """\
The domain is %(length)s characters long; it can be no longer than %(limit)s, per
[RFC3696](https://www.rfc-editor.org/errata/eid1690)."""


class SubDomainTooLong(AddressError):
    summary = "A sub-domain is too long. Length limit: %(limit)s"
    text = """\
The label `%(label)s` is %(length)s characters long; each dot-separated part of a domain name
can be no longer than %(limit)s."""


class DomainTooFew(AddressError):
    summary = "Too few parts in the domain."
    text = """\
The domain doesn't have enough dot-separated parts."""
    reserved = True


class DomainInvalidSeparator(AddressError):
    summary = "Invalid placement of the domain separator '.'."
    text = """\
The domain starts or ends with a dot, or has two dots in a row."""
    reserved = True


class UnbalancedQuotes(AddressError):
    summary = "Quotes around the local-part are unbalanced."
    text = """\
The local-part opens a quoted string that is never closed, or closes one that was never
opened."""
    reserved = True


class InvalidComment(AddressError):
    summary = "A comment was badly formed."
    text = """\
Comments (in parentheses) aren't supported in addresses."""
    reserved = True


class InvalidIPAddress(AddressError):
    summary = "Invalid IP Address specified for domain."
    text = """\
The domain literal `%(literal)s` isn't an IPv4 address or an `IPv6:`-tagged IPv6 address, as
described by [RFC5321](https://tools.ietf.org/html/rfc5321#section-4.1.3)."""


class CantHappen(AddressError):
    summary = "An impossible error was encountered."
    text = """\
The validator reached a state it considers impossible. Please report this, along with the
address that caused it."""
    reserved = True


ALL_ERRORS: List[Type[AddressError]] = [
    InvalidCharacter,
    MissingSeparator,
    LocalPartEmpty,
    LocalPartTooLong,
    DomainEmpty,
    DomainTooLong,
    SubDomainTooLong,
    DomainTooFew,
    DomainInvalidSeparator,
    UnbalancedQuotes,
    InvalidComment,
    InvalidIPAddress,
    CantHappen,
]
