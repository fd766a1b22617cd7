"""Storage of subject/class links in sefaire.csv."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .classes import ClasseRepository
from .matieres import MatiereRepository
from .models import SeFaire
from .storage import CsvTable, DuplicateError, NotFoundError


class AssociationRepository:
    """Links between subjects and classes kept in ``<data_dir>/sefaire.csv``."""

    def __init__(
        self,
        data_dir: str | os.PathLike[str] = "data",
        matieres: MatiereRepository | None = None,
        classes: ClasseRepository | None = None,
    ) -> None:
        self._table = CsvTable(Path(data_dir) / "sefaire.csv", SeFaire.HEADER)
        self._matieres = matieres if matieres is not None else MatiereRepository(data_dir)
        self._classes = classes if classes is not None else ClasseRepository(data_dir)

    def _load(self) -> Iterator[SeFaire]:
        for row in self._table.rows():
            try:
                yield SeFaire.from_row(row)
            except ValueError:
                return

    def associer(self, reference_matiere: str, code_classe: str) -> SeFaire:
        """Link a subject to a class.

        Raises DuplicateError if the link exists, NotFoundError if the subject
        or the class is unknown.
        """
        if self.chercher(reference_matiere, code_classe) is not None:
            raise DuplicateError(
                f"Association deja enregistree : {reference_matiere}/{code_classe}"
            )
        if self._matieres.chercher(reference_matiere) is None:
            raise NotFoundError(f"Matiere non trouvee : {reference_matiere}")
        if self._classes.chercher(code_classe) is None:
            raise NotFoundError(f"Classe non trouvee : {code_classe}")
        association = SeFaire(reference_matiere, code_classe)
        self._table.append(association.to_row())
        return association

    def lister(self) -> list[SeFaire]:
        return list(self._load())

    def supprimer(self, reference_matiere: str, code_classe: str) -> None:
        target = SeFaire(reference_matiere, code_classe)
        associations = self.lister()
        kept = [a for a in associations if a != target]
        if len(kept) == len(associations):
            raise NotFoundError(
                f"Association non trouvee : {reference_matiere}/{code_classe}"
            )
        self._table.rewrite(a.to_row() for a in kept)

    def chercher(self, reference_matiere: str, code_classe: str) -> SeFaire | None:
        target = SeFaire(reference_matiere, code_classe)
        return next((a for a in self._load() if a == target), None)


def formater_associations(associations: Iterable[SeFaire]) -> str:
    """Render links as a fixed-width table."""
    lines = [f"{'Reference Matiere':<20} {'Code Classe':<20}"]
    lines.extend(
        f"{a.reference_matiere:<20} {a.code_classe:<20}" for a in associations
    )
    return "\n".join(lines)