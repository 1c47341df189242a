#!/usr/bin/env python

import re
import sys

__all__ = [
    "rfc5234",
    "rfc5322",
    "rfc6532",
]


def check_regex() -> bool:
    """Grab all the regex in this module, and make sure they compile."""
    clean = True
    for module_name in __all__:
        full_name = f"addrspec.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            if attr_name.startswith("_"):
                continue
            attr_value = getattr(module, attr_name, None)
            if isinstance(attr_value, str):
                try:
                    re.compile(attr_value, re.VERBOSE)
                except re.error as why:
                    print("*", module_name, attr_name, why)
                    clean = False
    return clean


if __name__ == "__main__":
    sys.exit(0 if check_regex() else 1)
