"""
A collection of notes that the address linter can emit.

PLEASE NOTE: the summary field is automatically HTML escaped, so it can contain arbitrary text (as
long as it's unicode).

However, the longer text field IS NOT ESCAPED, so it's rendered as Markdown after all variables
interpolated into it have been escaped.
"""

from enum import Enum
from typing import Any, Dict, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    LOCAL_PART = "Local Part"
    DOMAIN = "Domain"
    I18N = "Internationalization"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about an email address, or one of its parts.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, Union[str, int]] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the note, escaped for HTML.
        """
        return escape(self.summary % self.vars)

    def show_text(self) -> Markup:
        """
        Show the HTML text for the note.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


class ADDRESS_SYNTAX_ERROR(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "%(address)s isn't a valid address: %(error)s"
    text = """\
The address doesn't conform to the `addr-spec` syntax of
[RFC5322](https://tools.ietf.org/html/rfc5322#section-3.4.1), as extended for UTF-8 by
[RFC6532](https://tools.ietf.org/html/rfc6532)."""


class ADDRESS_TOO_LONG(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The address is longer than %(limit)s characters."
    text = """\
Although its local-part and domain are each within their limits, this address is %(length)s
characters long. SMTP paths are limited to 256 octets including the surrounding angle brackets,
so many systems won't accept addresses longer than %(limit)s characters (see
[RFC3696 erratum 1690](https://www.rfc-editor.org/errata/eid1690))."""


class ANGLE_BRACKETS(Note):
    category = categories.GENERAL
    level = levels.INFO
    summary = "The angle brackets around the address were removed."
    text = """\
The address was enclosed in `<` and `>`, as it would be in a message header or an SMTP command.
They aren't part of the address itself, and have been ignored."""


class LOCAL_QUOTED(Note):
    category = categories.LOCAL_PART
    level = levels.INFO
    summary = "The local-part %(local)s is quoted."
    text = """\
Quoting the local-part allows characters such as spaces and `@` to appear in it. Although quoted
local-parts are valid, many applications and mail systems don't accept them."""


class LOCAL_QUOTE_UNNECESSARY(Note):
    category = categories.LOCAL_PART
    level = levels.WARN
    summary = "The local-part %(local)s doesn't need to be quoted."
    text = """\
The content of this quoted local-part is valid without quotes. [RFC5321](https://tools.ietf.org/html/rfc5321#section-4.1.2)
says that a local-part SHOULD NOT be quoted unless it has to be, so `%(unquoted)s` is preferred."""


class SMTPUTF8_REQUIRED(Note):
    category = categories.I18N
    level = levels.INFO
    summary = "The address contains non-ASCII characters."
    text = """\
Mail to or from this address can only be sent by servers that support the SMTPUTF8 extension,
defined by [RFC6531](https://tools.ietf.org/html/rfc6531). Servers that don't will reject it."""


class DOMAIN_DOTLESS(Note):
    category = categories.DOMAIN
    level = levels.WARN
    summary = "The domain %(domain)s has only one label."
    text = """\
Dotless domains such as `%(domain)s` are syntactically valid, and can work on a local network, but
ICANN strongly discourages their use on the public Internet, and they are unlikely to be
deliverable."""


class DOMAIN_LABEL_HYPHEN(Note):
    category = categories.DOMAIN
    level = levels.WARN
    summary = "The domain label %(label)s begins or ends with a hyphen."
    text = """\
Host names can't begin or end with a hyphen
([RFC1123](https://tools.ietf.org/html/rfc1123#section-2.1)), so although `%(label)s` is allowed by
the address syntax, no mail server can be found for it."""


class DOMAIN_LITERAL(Note):
    category = categories.DOMAIN
    level = levels.INFO
    summary = "The domain %(domain)s is an address literal."
    text = """\
Address literals direct mail to a specific host rather than a domain name. They are rarely used,
and many systems won't accept them."""


class DOMAIN_LITERAL_BAD_IP(Note):
    category = categories.DOMAIN
    level = levels.BAD
    summary = "The domain literal %(domain)s isn't an IP address."
    text = """\
An address literal is expected to hold an IPv4 address (e.g., `[192.0.2.1]`) or an IPv6 address
tagged with `IPv6:` (e.g., `[IPv6:2001:db8::1]`), as described in
[RFC5321](https://tools.ietf.org/html/rfc5321#section-4.1.3). The characters in this one are
allowed, but it can't be used to deliver mail."""
