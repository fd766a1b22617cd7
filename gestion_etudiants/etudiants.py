"""Storage of students in etudiants.csv."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .classes import ClasseRepository
from .models import Etudiant
from .storage import CsvTable, DuplicateError, NotFoundError


class EtudiantRepository:
    """Students kept in ``<data_dir>/etudiants.csv``, keyed by number.

    The class repository is used to check that a student's class exists.
    """

    def __init__(
        self,
        data_dir: str | os.PathLike[str] = "data",
        classes: ClasseRepository | None = None,
    ) -> None:
        self._table = CsvTable(Path(data_dir) / "etudiants.csv", Etudiant.HEADER)
        self._classes = classes if classes is not None else ClasseRepository(data_dir)

    def _load(self) -> Iterator[Etudiant]:
        for row in self._table.rows():
            try:
                yield Etudiant.from_row(row)
            except ValueError:
                return

    def _find(self, numero: str) -> Etudiant | None:
        return next((e for e in self._load() if e.numero == numero), None)

    def ajouter(self, etudiant: Etudiant) -> None:
        """Store a new student; raise DuplicateError if the number is taken."""
        if self._find(etudiant.numero) is not None:
            raise DuplicateError(f"Etudiant deja enregistre : {etudiant.numero}")
        self._table.append(etudiant.to_row())

    def lister(self) -> list[Etudiant]:
        return list(self._load())

    def modifier(
        self,
        numero: str,
        code_classe: str,
        nom: str,
        prenom: str,
        email: str,
        datenaissance: str,
    ) -> Etudiant:
        """Replace the details of a student and return the updated record.

        Raises NotFoundError if the student or the new class does not exist;
        nothing is written in that case.
        """
        etudiants = self.lister()
        if not any(e.numero == numero for e in etudiants):
            raise NotFoundError(f"Etudiant non trouve : {numero}")
        if self._classes.chercher(code_classe) is None:
            raise NotFoundError(
                f"Classe non trouvee : {code_classe}. Modification annulee."
            )
        updated = Etudiant(numero, nom, prenom, email, datenaissance, code_classe)
        self._table.rewrite(
            (updated if e.numero == numero else e).to_row() for e in etudiants
        )
        return updated

    def supprimer(self, numero: str) -> None:
        etudiants = self.lister()
        kept = [e for e in etudiants if e.numero != numero]
        if len(kept) == len(etudiants):
            raise NotFoundError(f"Etudiant non trouve : {numero}")
        self._table.rewrite(e.to_row() for e in kept)

    def chercher(self, numero: str) -> Etudiant | None:
        """Return the student, or None if absent or if its class is unknown."""
        etudiant = self._find(numero)
        if etudiant is None or self._classes.chercher(etudiant.code_classe) is None:
            return None
        return etudiant


def formater_etudiants(etudiants: Iterable[Etudiant]) -> str:
    """Render students one per line, fields separated by ' | '."""
    return "\n".join(" | ".join(e.to_row()) for e in etudiants)