"""Records handled by the student management tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence


def _fields(row: Sequence[str], expected: int, kind: str) -> tuple[str, ...]:
    fields = tuple(row)
    if len(fields) != expected:
        raise ValueError(
            f"{kind} : {expected} champs attendus, {len(fields)} recus"
        )
    return fields


def _float(value: str, kind: str, name: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{kind} : {name} invalide ({value!r})") from None


def _fmt(value: float) -> str:
    return f"{value:.2f}"


@dataclass
class Classe:
    """A class (group of students)."""

    HEADER: ClassVar[tuple[str, ...]] = ("code", "nom", "niveau")

    code: str
    nom: str
    niveau: str

    def to_row(self) -> tuple[str, ...]:
        return (self.code, self.nom, self.niveau)

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Classe:
        code, nom, niveau = _fields(row, 3, "Classe")
        return cls(code, nom, niveau)


@dataclass
class Matiere:
    """A subject with its coefficient."""

    HEADER: ClassVar[tuple[str, ...]] = ("reference", "libelle", "coefficient")

    reference: str
    libelle: str
    coefficient: float

    def to_row(self) -> tuple[str, ...]:
        return (self.reference, self.libelle, _fmt(self.coefficient))

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Matiere:
        reference, libelle, coefficient = _fields(row, 3, "Matiere")
        return cls(reference, libelle, _float(coefficient, "Matiere", "coefficient"))


@dataclass
class Etudiant:
    """A student enrolled in a class."""

    HEADER: ClassVar[tuple[str, ...]] = (
        "numero",
        "nom",
        "prenom",
        "email",
        "datenaissance",
        "codeClasse",
    )

    numero: str
    nom: str
    prenom: str
    email: str
    datenaissance: str
    code_classe: str

    def to_row(self) -> tuple[str, ...]:
        return (
            self.numero,
            self.nom,
            self.prenom,
            self.email,
            self.datenaissance,
            self.code_classe,
        )

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Etudiant:
        return cls(*_fields(row, 6, "Etudiant"))


@dataclass
class Note:
    """The continuous-assessment and exam marks of a student in a subject."""

    HEADER: ClassVar[tuple[str, ...]] = (
        "numeroEtudiant",
        "referenceMatiere",
        "noteCC",
        "noteDS",
    )

    numero_etudiant: str
    reference_matiere: str
    note_cc: float
    note_ds: float

    def to_row(self) -> tuple[str, ...]:
        return (
            self.numero_etudiant,
            self.reference_matiere,
            _fmt(self.note_cc),
            _fmt(self.note_ds),
        )

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Note:
        numero, reference, cc, ds = _fields(row, 4, "Note")
        return cls(
            numero,
            reference,
            _float(cc, "Note", "noteCC"),
            _float(ds, "Note", "noteDS"),
        )


@dataclass
class SeFaire:
    """Link stating that a subject is taught in a class."""

    HEADER: ClassVar[tuple[str, ...]] = ("referenceMatiere", "codeClasse")

    reference_matiere: str
    code_classe: str

    def to_row(self) -> tuple[str, ...]:
        return (self.reference_matiere, self.code_classe)

    @classmethod
    def from_row(cls, row: Sequence[str]) -> SeFaire:
        reference, code = _fields(row, 2, "SeFaire")
        return cls(reference, code)