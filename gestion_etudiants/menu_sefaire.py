"""Interactive menu for subject/class links."""

from __future__ import annotations

from .associations import AssociationRepository, formater_associations
from .console import Console
from .storage import DuplicateError, NotFoundError

_MENU = (
    "\n--- MENU ASSOCIATION MATIERE-CLASSE ---",
    "1. Associer une matiere a une classe",
    "2. Afficher les associations",
    "3. Supprimer une association",
    "4. Rechercher une association",
    "0. Retour",
)


def _ask_key(console: Console) -> tuple[str, str]:
    reference = console.prompt("Entrez la reference de la matiere : ")
    code = console.prompt("Entrez le code de la classe : ")
    return reference, code


def ajouter_sefaire_menu(console: Console, associations: AssociationRepository) -> None:
    console.clear()
    console.write("\n--- Associer une matiere a une classe ---")
    reference = console.prompt("Reference matiere : ")
    code = console.prompt("Code classe : ")
    try:
        associations.associer(reference, code)
    except DuplicateError:
        console.write("Association deja enregistree.")
    except NotFoundError as exc:
        console.write(str(exc))
    else:
        console.write("Association ajoutee !")


def afficher_sefaire_menu(console: Console, associations: AssociationRepository) -> None:
    console.clear()
    console.write("\n--- Affichage des associations ---")
    console.write(formater_associations(associations.lister()))


def supprimer_sefaire_menu(
    console: Console, associations: AssociationRepository
) -> None:
    console.clear()
    console.write("\n--- Supprimer une association ---")
    reference, code = _ask_key(console)
    try:
        associations.supprimer(reference, code)
    except NotFoundError:
        console.write("Association non trouvee.")
    else:
        console.write("Association supprimee !")


def chercher_sefaire_menu(console: Console, associations: AssociationRepository) -> None:
    console.clear()
    console.write("\n--- Rechercher une association ---")
    reference, code = _ask_key(console)
    found = associations.chercher(reference, code)
    if found is None:
        console.write("Association non trouvee.")
    else:
        console.write(
            f"Association trouvee : reference = {found.reference_matiere}, "
            f"code = {found.code_classe}"
        )


def menu_sefaire(console: Console, associations: AssociationRepository) -> None:
    """Run the subject/class menu until the user chooses 0 or input ends."""
    actions = {
        1: ajouter_sefaire_menu,
        2: afficher_sefaire_menu,
        3: supprimer_sefaire_menu,
        4: chercher_sefaire_menu,
    }
    console.clear()
    while True:
        for line in _MENU:
            console.write(line)
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
        action = actions.get(choix)
        if action is None:
            console.write("Choix invalide.")
            continue
        try:
            action(console, associations)
        except EOFError:
            return