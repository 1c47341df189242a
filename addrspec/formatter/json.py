"""
JSON Formatter for address checks.
"""

import json
from typing import Any, Dict, List
from typing_extensions import TypedDict, Unpack

from addrspec import __version__
from addrspec.formatter import Formatter, FormatterArgs
from addrspec.lint import AddressLinter


class NoteDict(TypedDict):
    subject: str
    category: str
    level: str
    summary: str
    detail: str


class ResultDict(TypedDict, total=False):
    input: str
    valid: bool
    local: str
    domain: str
    canonical: str
    uri: str
    error: str
    notes: List[NoteDict]


class JsonFormatter(Formatter):
    """
    Format checked addresses as a JSON document.
    """

    name = "json"
    media_type = "application/json"

    def __init__(self, *args: Unpack[FormatterArgs]) -> None:
        Formatter.__init__(self, *args)
        self.doc: Dict[str, Any] = {
            "creator": {"name": "addrspec", "version": __version__},
            "results": [],
        }

    def start_output(self) -> None:
        pass

    def feed(self, instr: str, linter: AddressLinter) -> None:
        result: ResultDict = {"input": instr, "valid": linter.address is not None}
        if linter.address is not None:
            result["local"] = linter.address.local
            result["domain"] = linter.address.domain
            result["canonical"] = str(linter.address)
            result["uri"] = linter.address.to_uri()
        elif linter.error is not None:
            result["error"] = str(linter.error)
        if self.show_notes:
            result["notes"] = self.format_notes(linter)
        self.doc["results"].append(result)

    def finish_output(self) -> None:
        self.output(json.dumps(self.doc, indent=4, ensure_ascii=False) + "\n")

    def error_output(self, message: str) -> None:
        # written out with the results by finish_output()
        self.doc["error"] = message

    @staticmethod
    def format_notes(linter: AddressLinter) -> List[NoteDict]:
        return [
            {
                "subject": note.subject,
                "category": note.category.value,
                "level": note.level.value,
                "summary": note.summary % note.vars,
                "detail": str(note.show_text()),
            }
            for note in linter.notes
        ]
