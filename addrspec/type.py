from typing import Callable, List

from addrspec.notes import Note

AddNoteMethodType = Callable[..., None]
NoteListType = List[Note]
