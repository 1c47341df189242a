"""
Regex for the addr-spec

These regex are derived from RFC5322 section 3.2 and 3.4.1:

  https://tools.ietf.org/html/rfc5322#section-3.4.1

as widened by RFC6532 section 3.2. Folding white space, comments and the
obsolete productions are left out, so atom, dot-atom, quoted-string and
domain-literal have no surrounding [CFWS].

They should be processed with re.VERBOSE.
"""

from .rfc5234 import VCHAR, WSP, ALPHA, DIGIT, DQUOTE
from .rfc6532 import UTF8_non_ascii

# pylint: disable=invalid-name


# qtext           =  %d33 /             ; Printable US-ASCII
#                    %d35-91 /          ;  characters not including
#                    %d93-126 /         ;  "\" or the quote character
#                    obs-qtext

qtext = rf"(?: [\x21\x23-\x5b\x5d-\x7e] | {UTF8_non_ascii} )"

# quoted-pair     =   ("\" (VCHAR / WSP)) / obs-qp
#
# Only VCHAR may be escaped inside a local-part.

quoted_pair = rf"(?: \\ {VCHAR} )"

# qcontent        =   qtext / quoted-pair
#
# WSP is admitted directly, standing in for the FWS of quoted-string.

qcontent = rf"(?: {qtext} | {quoted_pair} | {WSP} )"

# ctext           =   %d33-39 /          ; Printable US-ASCII
#                     %d42-91 /          ;  characters not including
#                     %d93-126 /         ;  "(", ")", or "\"
#                     obs-ctext

ctext = rf"(?: [\x21-\x27\x2a-\x5b\x5d-\x7e] | {UTF8_non_ascii} )"

# quoted-string   =  [CFWS]
#                    DQUOTE *([FWS] qcontent) [FWS] DQUOTE
#                    [CFWS]

quoted_string = rf"(?: {DQUOTE} {qcontent}* {DQUOTE} )"

# atext           =   ALPHA / DIGIT /    ; Printable US-ASCII
#                    "!" / "#" /        ;  characters not including
#                    "$" / "%" /        ;  specials.  Used for atoms.
#                    "&" / "'" /
#                    "*" / "+" /
#                    "-" / "/" /
#                    "=" / "?" /
#                    "^" / "_" /
#                    "`" / "{" /
#                    "|" / "}" /
#                    "~"

atext = rf"(?: {ALPHA} | {DIGIT} | [!#$%&'*+\-/=?^_`{{|}}~] | {UTF8_non_ascii} )"

# atom            =   [CFWS] 1*atext [CFWS]

atom = rf"(?: {atext}+ )"

# dot-atom-text   =   1*atext *("." 1*atext)

dot_atom_text = rf"(?: {atext}+ (?: \. {atext}+ )* )"

# dot-atom        =   [CFWS] dot-atom-text [CFWS]

dot_atom = dot_atom_text

# specials        =   "(" / ")" /        ; Special characters that do
#                     "<" / ">" /        ;  not appear in atext
#                     "[" / "]" /
#                     ":" / ";" /
#                     "@" / "\" /
#                     "," / "." /
#                     DQUOTE

specials = r"""[()<>\[\]:;@\\,.\x22]"""

# local-part      =   dot-atom / quoted-string / obs-local-part

local_part = rf"(?: {dot_atom} | {quoted_string} )"

# dtext           =   %d33-90 /          ; Printable US-ASCII
#                     %d94-126 /         ;  characters not including
#                     obs-dtext          ;  "[", "]", or "\"
#
# dtext is not widened with UTF8-non-ascii; address literals are ASCII.

dtext = r"[\x21-\x5a\x5e-\x7e]"

# domain-literal  =   [CFWS] "[" *([FWS] dtext) [FWS] "]" [CFWS]

domain_literal = rf"(?: \[ {dtext}* \] )"

# domain          =   dot-atom / domain-literal / obs-domain

domain = rf"(?: {dot_atom} | {domain_literal} )"

# addr-spec       =   local-part "@" domain

addr_spec = rf"(?: {local_part} @ {domain} )"

# angle-addr      =   [CFWS] "<" addr-spec ">" [CFWS] /
#                     obs-angle-addr

angle_addr = rf"(?: \< {addr_spec} \> )"
