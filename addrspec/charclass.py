"""
Character classes for the addr-spec.

Each predicate takes a single character and answers whether it belongs to the
named ABNF class; anything that isn't exactly one character doesn't.
"""

import re

from addrspec.syntax import rfc5234, rfc5322, rfc6532

RE_FLAGS = re.VERBOSE

_ATEXT = re.compile(rfc5322.atext, RE_FLAGS)
_UCHAR = re.compile(rfc6532.UTF8_non_ascii, RE_FLAGS)
_VCHAR = re.compile(rfc5234.VCHAR, RE_FLAGS)
_WSP = re.compile(rfc5234.WSP, RE_FLAGS)
_QTEXT = re.compile(rfc5322.qtext, RE_FLAGS)
_DTEXT = re.compile(rfc5322.dtext, RE_FLAGS)
_CTEXT = re.compile(rfc5322.ctext, RE_FLAGS)
_SPECIALS = re.compile(rfc5322.specials, RE_FLAGS)


def is_atext(char: str) -> bool:
    "ALPHA, DIGIT, the atom punctuation, or UTF8-non-ascii."
    return _ATEXT.fullmatch(char) is not None


def is_uchar(char: str) -> bool:
    "Any character above US-ASCII (RFC6531 UTF8-non-ascii)."
    return _UCHAR.fullmatch(char) is not None


def is_vchar(char: str) -> bool:
    "Visible US-ASCII, %x21-7E."
    return _VCHAR.fullmatch(char) is not None


def is_wsp(char: str) -> bool:
    "Space or horizontal tab."
    return _WSP.fullmatch(char) is not None


def is_qtext_char(char: str) -> bool:
    """
    Printable US-ASCII except the double quote and backslash, or
    UTF8-non-ascii.
    """
    return _QTEXT.fullmatch(char) is not None


def is_dtext_char(char: str) -> bool:
    "Printable US-ASCII except '[', ']' and backslash."
    return _DTEXT.fullmatch(char) is not None


def is_ctext_char(char: str) -> bool:
    "Printable US-ASCII except '(', ')' and backslash, or UTF8-non-ascii."
    return _CTEXT.fullmatch(char) is not None


def is_special(char: str) -> bool:
    return _SPECIALS.fullmatch(char) is not None
