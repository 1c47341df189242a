"""
Text Formatter for address checks.
"""

from html.parser import HTMLParser
import re
import textwrap
from typing import List, Optional
from typing_extensions import Unpack

from addrspec.formatter import Formatter, FormatterArgs
from addrspec.lint import AddressLinter
from addrspec.notes import Note, levels

NL = "\n"


class TextFormatter(Formatter):
    """
    Format checked addresses as text, one per line.
    """

    name = "text"
    media_type = "text/plain"

    error_template = "Error: %s\n"

    def __init__(self, *args: Unpack[FormatterArgs]) -> None:
        Formatter.__init__(self, *args)
        self.verbose = self.kw.get("verbose", False)

    def start_output(self) -> None:
        pass

    def feed(self, instr: str, linter: AddressLinter) -> None:
        if linter.address is not None:
            line = f"{self.colorize(levels.GOOD, 'valid')}   {linter.address}"
        else:
            line = f"{self.colorize(levels.BAD, 'invalid')} {instr}: {linter.error}"
        self.output(line + NL)
        if self.show_notes:
            notes = self.format_notes(linter.notes)
            if notes:
                self.output(notes)

    def finish_output(self) -> None:
        pass

    def error_output(self, message: str) -> None:
        self.output(self.error_template % message)

    def format_notes(self, notes: List[Note]) -> str:
        out = []
        for note in notes:
            out.append(f"  * {self.colorize(note.level, note.summary % note.vars)}")
            if self.verbose:
                out.append("")
                out.extend("    " + line for line in self.format_text(note))
                out.append("")
        if not out:
            return ""
        return NL.join(out) + NL

    @staticmethod
    def format_text(note: Note) -> List[str]:
        return textwrap.wrap(strip_tags(re.sub(r"(?m)\s\s+", " ", note.show_text())))

    def colorize(self, level: Optional[levels], instr: str) -> str:
        if self.kw.get("tty_out", False):
            color_end = "\033[0;39m"
            if level == levels.GOOD:
                color_start = "\033[1;32m"
            elif level == levels.BAD:
                color_start = "\033[1;31m"
            elif level == levels.WARN:
                color_start = "\033[1;33m"
            else:
                color_start = "\033[1;34m"
            return color_start + instr + color_end
        return instr


class MLStripper(HTMLParser):
    def __init__(self) -> None:
        HTMLParser.__init__(self)
        self.reset()
        self.fed: List[str] = []

    def handle_data(self, data: str) -> None:
        self.fed.append(data)

    def get_data(self) -> str:
        return "".join(self.fed)


def strip_tags(html: str) -> str:
    stripper = MLStripper()
    stripper.feed(html)
    stripper.close()
    return stripper.get_data()
