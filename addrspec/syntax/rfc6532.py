"""
Regex for the UTF-8 extensions to the message format

RFC6532 widens several RFC5322 character classes with UTF8-non-ascii:

  https://tools.ietf.org/html/rfc6532#section-3.2

Here the input is already decoded text, so UTF8-non-ascii is expressed as a
range of code points rather than octets. Surrogates are excluded, as they are
in the UTF-8 grammar of RFC3629.

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

# UTF8-non-ascii  =   UTF8-2 / UTF8-3 / UTF8-4

UTF8_non_ascii = r"[\u0080-\ud7ff\ue000-\U0010ffff]"

# atext   =/  UTF8-non-ascii
# qtext   =/  UTF8-non-ascii
# dtext   =/  UTF8-non-ascii
# ctext   =/  UTF8-non-ascii
#
# The widened classes themselves are built in rfc5322, next to the rules
# they extend.
