"""Interactive menu for classes, and the menu helpers shared by the other menus."""

from __future__ import annotations

from functools import partial
from typing import Callable, Optional, Sequence, Tuple, Type

from .classes import ClasseRepository, formater_classes
from .console import Console
from .models import Classe
from .storage import DuplicateError, NotFoundError

MenuEntry = Tuple[str, Callable[[], None]]


def _section(console: Console, title: str) -> None:
    """Clear the screen and print a section heading."""
    console.clear()
    console.write(f"\n--- {title} ---")


def _attempt(
    console: Console,
    operation: Callable[[], object],
    success: str,
    error_type: Type[Exception],
    failure: Optional[str] = None,
) -> None:
    """Run an operation and report its outcome; without a failure text the error's own is shown."""
    try:
        operation()
    except error_type as exc:
        console.write(str(exc) if failure is None else failure)
    else:
        console.write(success)


def _run_menu(console: Console, title: str, entries: Sequence[MenuEntry]) -> None:
    """Show a numbered menu until the user chooses 0 or input ends."""
    console.clear()
    while True:
        console.write(f"\n--- MENU {title} ---")
        for number, (label, _) in enumerate(entries, start=1):
            console.write(f"{number}. {label}")
        console.write("0. Retour")
        try:
            choix = console.prompt_int("Votre choix : ")
        except ValueError:
            console.write("Choix invalide.")
            continue
        except EOFError:
            return
        if choix == 0:
            console.write("Retour au menu principal.")
            return
        if not 1 <= choix <= len(entries):
            console.write("Choix invalide.")
            continue
        try:
            entries[choix - 1][1]()
        except EOFError:
            return


_NOT_FOUND = "Classe non trouvee."


def ajouter_classe_menu(console: Console, classes: ClasseRepository) -> None:
    _section(console, "Ajouter une classe")
    code, nom, niveau = [console.prompt(label) for label in ("Code : ", "Nom : ", "Niveau : ")]
    _attempt(
        console,
        lambda: classes.ajouter(Classe(code, nom, niveau)),
        "Classe ajoutee !",
        DuplicateError,
        "Classe deja enregistree.",
    )


def afficher_classe_menu(console: Console, classes: ClasseRepository) -> None:
    _section(console, "Affichage des classes")
    console.write(formater_classes(classes.lister()))


def modifier_classe_menu(console: Console, classes: ClasseRepository) -> None:
    _section(console, "Modifier une classe")
    code = console.prompt("Entrez le code de la classe a modifier : ")
    if classes.chercher(code) is None:
        console.write(_NOT_FOUND)
        return
    nom = console.prompt("Nouveau nom : ")
    niveau = console.prompt("Nouveau niveau : ")
    _attempt(
        console,
        lambda: classes.modifier(code, nom, niveau),
        "Classe modifiee !",
        NotFoundError,
        _NOT_FOUND,
    )


def supprimer_classe_menu(console: Console, classes: ClasseRepository) -> None:
    _section(console, "Supprimer une classe")
    code = console.prompt("Entrez le code de la classe a supprimer : ")
    _attempt(
        console, lambda: classes.supprimer(code), "Classe supprimee !", NotFoundError, _NOT_FOUND
    )


def chercher_classe_menu(console: Console, classes: ClasseRepository) -> None:
    _section(console, "Rechercher une classe")
    classe = classes.chercher(console.prompt("Entrez le code de la classe a rechercher : "))
    if classe is None:
        console.write(_NOT_FOUND)
    else:
        console.write(
            f"Classe trouvee : code = {classe.code}, nom = {classe.nom}, "
            f"niveau = {classe.niveau}"
        )


def menu_classe(console: Console, classes: ClasseRepository) -> None:
    """Run the class menu until the user chooses 0 or input ends."""
    actions = (
        ("Ajouter une classe", ajouter_classe_menu),
        ("Afficher les classes", afficher_classe_menu),
        ("Modifier une classe", modifier_classe_menu),
        ("Supprimer une classe", supprimer_classe_menu),
        ("Rechercher une classe", chercher_classe_menu),
    )
    _run_menu(
        console, "CLASSE", [(label, partial(fn, console, classes)) for label, fn in actions]
    )