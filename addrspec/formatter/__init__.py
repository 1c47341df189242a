"""
Formatters for address check output.
"""

from configparser import SectionProxy
import inspect
import sys
from typing import Any, Callable, Dict, List, Tuple, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from addrspec.lint import AddressLinter  # pylint: disable=cyclic-import

_formatters = ["text", "json"]


def find_formatter(name: str, default: str = "text") -> Type["Formatter"]:
    """
    Find the formatter for name, and use default if it can't be found.
    """
    if name not in _formatters:
        name = default
    try:
        module_name = f"addrspec.formatter.{name}"
        __import__(module_name)
        module = sys.modules[module_name]
    except (ImportError, KeyError, TypeError):
        return find_formatter(default)
    for value in list(module.__dict__.values()):
        if (
            inspect.isclass(value)
            and issubclass(value, Formatter)
            and getattr(value, "name") == name
        ):
            return value
    raise RuntimeError(f"Can't find a format in {_formatters}")


def available_formatters() -> List[str]:
    """
    Return a list of the available formatter names.
    """
    return _formatters


FormatterArgs = Tuple[SectionProxy, Callable[[str], None], Dict[str, Any]]


class Formatter:
    """
    A formatter for checked addresses.

    Is available to UIs based upon the 'name' attribute.
    """

    media_type: str  # the media type of the format.
    name: str = "base class"  # the name of the format.

    def __init__(
        self,
        config: SectionProxy,
        output: Callable[[str], None],
        params: Dict[str, Any],
    ) -> None:
        """
        Formatter writing to the callable output(uni_str). Output is Unicode;
        callee is responsible for encoding correctly.
        """
        self.config = config
        self.output = output
        self.kw = params
        self.show_notes = params.get("show_notes", False)

    def start_output(self) -> None:
        """
        Send preliminary output.
        """
        raise NotImplementedError

    def feed(self, instr: str, linter: "AddressLinter") -> None:
        """
        Output the results of checking instr.
        """
        raise NotImplementedError

    def finish_output(self) -> None:
        """
        Finalise output.
        """
        raise NotImplementedError

    def error_output(self, message: str) -> None:
        """
        Output an error.
        """
        raise NotImplementedError
