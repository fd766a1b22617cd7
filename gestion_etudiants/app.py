"""Main menu of the student management tool."""

from __future__ import annotations

import argparse
import os
from typing import Sequence

from .associations import AssociationRepository
from .classes import ClasseRepository
from .console import Console
from .etudiants import EtudiantRepository
from .matieres import MatiereRepository
from .menu_classe import menu_classe
from .menu_etudiant import menu_etudiant
from .menu_matiere import menu_matiere
from .menu_note import menu_note
from .menu_sefaire import menu_sefaire
from .notes import NoteRepository

_MENU = (
    "\n==== MENU PRINCIPAL ====",
    "1. Gerer les etudiants",
    "2. Gerer les matieres",
    "3. Gerer les classes",
    "4. Gerer les notes",
    "5. Gerer les associations matiere-classe",
    "0. Quitter",
)


def menu(
    console: Console | None = None, data_dir: str | os.PathLike[str] = "data"
) -> None:
    """Run the main menu until the user quits or input ends."""
    console = console if console is not None else Console()
    classes = ClasseRepository(data_dir)
    matieres = MatiereRepository(data_dir)
    etudiants = EtudiantRepository(data_dir, classes)
    notes = NoteRepository(data_dir)
    associations = AssociationRepository(data_dir, matieres, classes)
    actions = {
        1: lambda: menu_etudiant(console, etudiants, classes),
        2: lambda: menu_matiere(console, matieres),
        3: lambda: menu_classe(console, classes),
        4: lambda: menu_note(console, notes, etudiants, matieres),
        5: lambda: menu_sefaire(console, associations),
    }
    while True:
        for line in _MENU:
            console.write(line)
        try:
            choix = console.prompt_int("Votre choix : ")
        except ValueError:
            console.write("Choix invalide. Veuillez reessayer.")
            continue
        except EOFError:
            return
        if choix == 0:
            console.write("Au revoir !")
            return
        action = actions.get(choix)
        if action is None:
            console.write("Choix invalide. Veuillez reessayer.")
            continue
        action()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gestion_etudiants",
        description="Gestion des etudiants, classes, matieres et notes.",
    )
    parser.add_argument(
        "--data-dir",
        default="data",
        help="dossier des fichiers CSV (par defaut : data)",
    )
    args = parser.parse_args(argv)
    menu(Console(), args.data_dir)
    return 0