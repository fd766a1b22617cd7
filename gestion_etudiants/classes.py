"""Storage of classes in classes.csv."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Iterator

from .models import Classe
from .storage import CsvTable, DuplicateError, NotFoundError


class ClasseRepository:
    """Classes kept in ``<data_dir>/classes.csv``, keyed by code."""

    def __init__(self, data_dir: str | os.PathLike[str] = "data") -> None:
        self._table = CsvTable(Path(data_dir) / "classes.csv", Classe.HEADER)

    def _load(self) -> Iterator[Classe]:
        for row in self._table.rows():
            try:
                yield Classe.from_row(row)
            except ValueError:
                return

    def ajouter(self, classe: Classe) -> None:
        """Store a new class; raise DuplicateError if the code is taken."""
        if self.chercher(classe.code) is not None:
            raise DuplicateError(f"Classe deja enregistree : {classe.code}")
        self._table.append(classe.to_row())

    def lister(self) -> list[Classe]:
        return list(self._load())

    def modifier(self, code: str, nom: str, niveau: str) -> Classe:
        """Change the name and level of a class and return it."""
        found = False
        updated = []
        for classe in self._load():
            if classe.code == code:
                classe = replace(classe, nom=nom, niveau=niveau)
                found = True
            updated.append(classe)
        if not found:
            raise NotFoundError(f"Classe non trouvee : {code}")
        self._table.rewrite(c.to_row() for c in updated)
        return Classe(code, nom, niveau)

    def supprimer(self, code: str) -> None:
        classes = self.lister()
        kept = [c for c in classes if c.code != code]
        if len(kept) == len(classes):
            raise NotFoundError(f"Classe non trouvee : {code}")
        self._table.rewrite(c.to_row() for c in kept)

    def chercher(self, code: str) -> Classe | None:
        return next((c for c in self._load() if c.code == code), None)


def formater_classes(classes: Iterable[Classe]) -> str:
    """Render classes as a fixed-width table."""
    lines = [f"{'Code':<20} {'Nom':<20} {'Niveau':<20}"]
    lines.extend(f"{c.code:<20} {c.nom:<20} {c.niveau:<20}" for c in classes)
    return "\n".join(lines)