"""Storage of marks in notes.csv."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .models import Note
from .storage import CsvTable, DuplicateError, NotFoundError


class NoteRepository:
    """Marks kept in ``<data_dir>/notes.csv``, keyed by student and subject."""

    def __init__(self, data_dir: str | os.PathLike[str] = "data") -> None:
        self._table = CsvTable(Path(data_dir) / "notes.csv", Note.HEADER)

    def _load(self) -> Iterator[Note]:
        for row in self._table.rows():
            try:
                yield Note.from_row(row)
            except ValueError:
                return

    @staticmethod
    def _matches(note: Note, numero_etudiant: str, reference_matiere: str) -> bool:
        return (
            note.numero_etudiant == numero_etudiant
            and note.reference_matiere == reference_matiere
        )

    def ajouter(self, note: Note) -> None:
        """Store a new mark; raise DuplicateError if one exists for the pair."""
        if self.chercher(note.numero_etudiant, note.reference_matiere) is not None:
            raise DuplicateError(
                f"Note deja enregistree : {note.numero_etudiant}/{note.reference_matiere}"
            )
        self._table.append(note.to_row())

    def lister(self) -> list[Note]:
        return list(self._load())

    def modifier(
        self,
        numero_etudiant: str,
        reference_matiere: str,
        note_cc: float,
        note_ds: float,
    ) -> Note:
        """Change both marks of a student in a subject and return the record."""
        notes = self.lister()
        if not any(self._matches(n, numero_etudiant, reference_matiere) for n in notes):
            raise NotFoundError(
                f"Note non trouvee : {numero_etudiant}/{reference_matiere}"
            )
        updated = Note(numero_etudiant, reference_matiere, note_cc, note_ds)
        self._table.rewrite(
            (updated if self._matches(n, numero_etudiant, reference_matiere) else n).to_row()
            for n in notes
        )
        return updated

    def supprimer(self, numero_etudiant: str, reference_matiere: str) -> None:
        notes = self.lister()
        kept = [
            n for n in notes if not self._matches(n, numero_etudiant, reference_matiere)
        ]
        if len(kept) == len(notes):
            raise NotFoundError(
                f"Note non trouvee : {numero_etudiant}/{reference_matiere}"
            )
        self._table.rewrite(n.to_row() for n in kept)

    def chercher(self, numero_etudiant: str, reference_matiere: str) -> Note | None:
        return next(
            (
                n
                for n in self._load()
                if self._matches(n, numero_etudiant, reference_matiere)
            ),
            None,
        )


def formater_notes(notes: Iterable[Note]) -> str:
    """Render marks as a fixed-width table."""
    lines = [
        f"{'Numero etudiant':<20} {'Reference matiere':<20} {'NoteCC':<10} {'NoteDS':<10}"
    ]
    lines.extend(
        f"{n.numero_etudiant:<20} {n.reference_matiere:<20} "
        f"{n.note_cc:<10.2f} {n.note_ds:<10.2f}"
        for n in notes
    )
    return "\n".join(lines)