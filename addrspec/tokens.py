"""
Recognisers for the tokens that make up an addr-spec.

These answer whether an entire string is an instance of the token; there is no
partial match.
"""

import re

from addrspec.charclass import RE_FLAGS
from addrspec.syntax import rfc5322

DOT = "."

_ATOM = re.compile(rfc5322.atom, RE_FLAGS)
_QCONTENT = re.compile(rf"{rfc5322.qcontent}*", RE_FLAGS)
_DTEXT = re.compile(rf"{rfc5322.dtext}*", RE_FLAGS)
_CTEXT = re.compile(rf"{rfc5322.ctext}*", RE_FLAGS)


def is_atom(instr: str) -> bool:
    "One or more atext."
    return _ATOM.fullmatch(instr) is not None


def is_dot_atom_text(instr: str) -> bool:
    """
    Atoms joined by single dots. Leading, trailing and doubled dots all leave
    an empty segment behind, which isn't an atom.
    """
    return all(is_atom(segment) for segment in instr.split(DOT))


def is_qcontent(instr: str) -> bool:
    """
    The body of a quoted-string: qtext, WSP, and backslash followed by a
    VCHAR. The empty string qualifies.
    """
    return _QCONTENT.fullmatch(instr) is not None


def is_dtext(instr: str) -> bool:
    """
    The body of a domain-literal. The empty string qualifies; whether the body
    is an address is a separate question (see EmailAddress.ip_address).
    """
    return _DTEXT.fullmatch(instr) is not None


def is_ctext(instr: str) -> bool:
    return _CTEXT.fullmatch(instr) is not None
