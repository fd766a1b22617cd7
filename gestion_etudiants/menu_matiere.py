"""Interactive menu for subjects."""

from __future__ import annotations

from functools import partial
from typing import Optional

from .console import Console
from .matieres import MatiereRepository, formater_matieres
from .menu_classe import _attempt, _run_menu, _section
from .models import Matiere
from .storage import DuplicateError, NotFoundError

_NOT_FOUND = "Matiere non trouvee."


def _ask_coefficient(console: Console, label: str) -> Optional[float]:
    """Read a coefficient, or report it as invalid and return None."""
    try:
        return console.prompt_float(label)
    except ValueError:
        console.write("Coefficient invalide.")
        return None


def ajouter_matiere_menu(console: Console, matieres: MatiereRepository) -> None:
    _section(console, "Ajouter une matiere")
    reference = console.prompt("Reference : ")
    libelle = console.prompt("Libelle : ")
    coefficient = _ask_coefficient(console, "Coefficient : ")
    if coefficient is None:
        return
    _attempt(
        console,
        lambda: matieres.ajouter(Matiere(reference, libelle, coefficient)),
        "Matiere ajoutee !",
        DuplicateError,
        "Matiere deja enregistree.",
    )


def afficher_matiere_menu(console: Console, matieres: MatiereRepository) -> None:
    _section(console, "Affichage des matieres")
    console.write(formater_matieres(matieres.lister()))


def modifier_matiere_menu(console: Console, matieres: MatiereRepository) -> None:
    _section(console, "Modifier une matiere")
    reference = console.prompt("Entrez la reference de la matiere a modifier : ")
    if matieres.chercher(reference) is None:
        console.write(_NOT_FOUND)
        return
    libelle = console.prompt("Nouveau libelle : ")
    coefficient = _ask_coefficient(console, "Nouveau coefficient : ")
    if coefficient is None:
        return
    _attempt(
        console,
        lambda: matieres.modifier(reference, libelle, coefficient),
        "Matiere modifiee !",
        NotFoundError,
        _NOT_FOUND,
    )


def supprimer_matiere_menu(console: Console, matieres: MatiereRepository) -> None:
    _section(console, "Supprimer une matiere")
    reference = console.prompt("Entrez la reference de la matiere a supprimer : ")
    _attempt(
        console,
        lambda: matieres.supprimer(reference),
        "Matiere supprimee !",
        NotFoundError,
        _NOT_FOUND,
    )


def chercher_matiere_menu(console: Console, matieres: MatiereRepository) -> None:
    _section(console, "Rechercher une matiere")
    matiere = matieres.chercher(
        console.prompt("Entrez la reference de la matiere a rechercher : ")
    )
    if matiere is None:
        console.write(_NOT_FOUND)
    else:
        console.write(
            f"Matiere trouvee :  reference = {matiere.reference}, "
            f"libelle = {matiere.libelle}, coefficient = {matiere.coefficient:.2f} "
        )


def menu_matiere(console: Console, matieres: MatiereRepository) -> None:
    """Run the subject menu until the user chooses 0 or input ends."""
    actions = (
        ("Ajouter une matiere", ajouter_matiere_menu),
        ("Afficher les matieres", afficher_matiere_menu),
        ("Modifier une matiere", modifier_matiere_menu),
        ("Supprimer une matiere", supprimer_matiere_menu),
        ("Rechercher une matiere", chercher_matiere_menu),
    )
    _run_menu(
        console, "MATIERE", [(label, partial(fn, console, matieres)) for label, fn in actions]
    )