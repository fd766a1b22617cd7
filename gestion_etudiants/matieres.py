"""Storage of subjects in matieres.csv."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Iterator

from .models import Matiere
from .storage import CsvTable, DuplicateError, NotFoundError


class MatiereRepository:
    """Subjects kept in ``<data_dir>/matieres.csv``, keyed by reference."""

    def __init__(self, data_dir: str | os.PathLike[str] = "data") -> None:
        self._table = CsvTable(Path(data_dir) / "matieres.csv", Matiere.HEADER)

    def _load(self) -> Iterator[Matiere]:
        for row in self._table.rows():
            try:
                yield Matiere.from_row(row)
            except ValueError:
                return

    def ajouter(self, matiere: Matiere) -> None:
        """Store a new subject; raise DuplicateError if the reference is taken."""
        if self.chercher(matiere.reference) is not None:
            raise DuplicateError(f"Matiere deja enregistree : {matiere.reference}")
        self._table.append(matiere.to_row())

    def lister(self) -> list[Matiere]:
        return list(self._load())

    def modifier(self, reference: str, libelle: str, coefficient: float) -> Matiere:
        """Change the label and coefficient of a subject and return it."""
        found = False
        updated = []
        for matiere in self._load():
            if matiere.reference == reference:
                matiere = replace(matiere, libelle=libelle, coefficient=coefficient)
                found = True
            updated.append(matiere)
        if not found:
            raise NotFoundError(f"Matiere non trouvee : {reference}")
        self._table.rewrite(m.to_row() for m in updated)
        return Matiere(reference, libelle, coefficient)

    def supprimer(self, reference: str) -> None:
        matieres = self.lister()
        kept = [m for m in matieres if m.reference != reference]
        if len(kept) == len(matieres):
            raise NotFoundError(f"Matiere non trouvee : {reference}")
        self._table.rewrite(m.to_row() for m in kept)

    def chercher(self, reference: str) -> Matiere | None:
        return next((m for m in self._load() if m.reference == reference), None)


def formater_matieres(matieres: Iterable[Matiere]) -> str:
    """Render subjects as a fixed-width table."""
    lines = [f"{'Reference':<20} {'Libelle':<50} {'Coefficient':<10}"]
    lines.extend(
        f"{m.reference:<20} {m.libelle:<50} {m.coefficient:<10.2f}" for m in matieres
    )
    return "\n".join(lines)