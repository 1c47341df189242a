"""
Advice about email addresses.

Validity is decided by addrspec.address; an address can be perfectly valid and
still be unlikely to work, or be written in a way that many systems reject.
The linter collects Notes about those things.
"""

import re
from typing import Optional, Type, Union

from addrspec.address import DQUOTE, GT, LT, EmailAddress
from addrspec.errors import AddressError, InvalidIPAddress
from addrspec.notes import (
    Note,
    ADDRESS_SYNTAX_ERROR,
    ADDRESS_TOO_LONG,
    ANGLE_BRACKETS,
    LOCAL_QUOTED,
    LOCAL_QUOTE_UNNECESSARY,
    SMTPUTF8_REQUIRED,
    DOMAIN_DOTLESS,
    DOMAIN_LABEL_HYPHEN,
    DOMAIN_LITERAL,
    DOMAIN_LITERAL_BAD_IP,
)
from addrspec.tokens import DOT, is_dot_atom_text
from addrspec.type import AddNoteMethodType, NoteListType

ADDRESS_MAX_LENGTH = 254


class AddressLinter:
    """
    Check an email address, collecting Notes about it.

    After check(), address holds the EmailAddress if it was valid, and error
    holds the AddressError if it wasn't.
    """

    def __init__(self) -> None:
        self.notes: NoteListType = []
        self.address: Optional[EmailAddress] = None
        self.error: Optional[AddressError] = None

    def add_note(self, subject: str, note: Type[Note], **kw: Union[str, int]) -> None:
        "Set a note."
        self.notes.append(note(subject, kw))

    def check(self, instr: str) -> Optional[EmailAddress]:
        try:
            self.address = EmailAddress(instr)
        except AddressError as why:
            self.error = why
            self.add_note("address", ADDRESS_SYNTAX_ERROR, address=instr, error=str(why))
            return None
        if instr.startswith(LT) and instr.endswith(GT):
            self.add_note("address", ANGLE_BRACKETS)
        check_local_part(self.address, self.add_note)
        check_domain(self.address, self.add_note)
        if self.address.requires_smtputf8:
            self.add_note("address", SMTPUTF8_REQUIRED)
        length = len(str(self.address))
        if length > ADDRESS_MAX_LENGTH:
            self.add_note(
                "address", ADDRESS_TOO_LONG, length=length, limit=ADDRESS_MAX_LENGTH
            )
        return self.address


def unquote_string(instr: str) -> str:
    """
    Unquote a quoted local-part, removing the backslash from quoted-pairs.
    Anything not surrounded by double quotes is returned as-is.
    """
    if len(instr) > 1 and instr[0] == instr[-1] == DQUOTE:
        instr = re.sub(r"\\(.)", r"\1", instr[1:-1])
    return instr


def check_local_part(address: EmailAddress, add_note: AddNoteMethodType) -> None:
    if not address.is_quoted:
        return
    add_note("local-part", LOCAL_QUOTED, local=address.local)
    unquoted = unquote_string(address.local)
    if is_dot_atom_text(unquoted):
        add_note(
            "local-part", LOCAL_QUOTE_UNNECESSARY, local=address.local, unquoted=unquoted
        )


def check_domain(address: EmailAddress, add_note: AddNoteMethodType) -> None:
    if address.is_literal:
        add_note("domain", DOMAIN_LITERAL, domain=address.domain)
        try:
            address.ip_address  # pylint: disable=pointless-statement
        except InvalidIPAddress:
            add_note("domain", DOMAIN_LITERAL_BAD_IP, domain=address.domain)
        return
    labels = address.domain.split(DOT)
    if len(labels) == 1:
        add_note("domain", DOMAIN_DOTLESS, domain=address.domain)
    for label in labels:
        if label.startswith("-") or label.endswith("-"):
            add_note("domain", DOMAIN_LABEL_HYPHEN, label=label)
