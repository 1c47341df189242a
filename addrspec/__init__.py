"""
Validation of RFC5322 / RFC6532 email addresses.
"""

__version__ = "1.0.0"

from addrspec.address import (
    EmailAddress,
    validate,
    is_valid,
    is_valid_local_part,
    is_valid_domain,
)
from addrspec.errors import AddressError
from addrspec.format import to_canonical_string, to_uri, to_display
