"""Interactive menu for students."""

from __future__ import annotations

from functools import partial

from .classes import ClasseRepository
from .console import Console
from .etudiants import EtudiantRepository, formater_etudiants
from .menu_classe import _attempt, _run_menu, _section
from .models import Etudiant
from .storage import DuplicateError, NotFoundError

_NOT_FOUND = "Etudiant non trouve."


def ajouter_etudiant_menu(
    console: Console, etudiants: EtudiantRepository, classes: ClasseRepository
) -> None:
    _section(console, "Ajouter un etudiant")
    labels = (
        "Numero : ",
        "Nom : ",
        "Prenom : ",
        "Email : ",
        "Date de naissance (YYYY-MM-DD) : ",
        "Code de la classe : ",
    )
    fields = [console.prompt(label) for label in labels]
    if classes.chercher(fields[-1]) is None:
        console.write("Classe non trouvee. Ajout annule.")
        return
    _attempt(
        console,
        lambda: etudiants.ajouter(Etudiant(*fields)),
        "Etudiant ajoute !",
        DuplicateError,
        "Etudiant deja enregistre.",
    )


def afficher_etudiant_menu(console: Console, etudiants: EtudiantRepository) -> None:
    _section(console, "Affichage des etudiants")
    text = formater_etudiants(etudiants.lister())
    if text:
        console.write(text)


def modifier_etudiant_menu(
    console: Console, etudiants: EtudiantRepository, classes: ClasseRepository
) -> None:
    _section(console, "Modifier un etudiant")
    numero = console.prompt("Entrez le numero de l'etudiant a modifier : ")
    if not any(e.numero == numero for e in etudiants.lister()):
        console.write(_NOT_FOUND)
        return
    code_classe = console.prompt("Nouvelle classe : ")
    if classes.chercher(code_classe) is None:
        console.write("Classe non trouvee. Modification annulee.")
        return
    labels = (
        "Nouveau nom : ",
        "Nouveau prenom : ",
        "Nouvel email : ",
        "Nouvelle date de naissance : ",
    )
    nom, prenom, email, datenaissance = [console.prompt(label) for label in labels]
    _attempt(
        console,
        lambda: etudiants.modifier(numero, code_classe, nom, prenom, email, datenaissance),
        "Etudiant modifie !",
        NotFoundError,
    )


def supprimer_etudiant_menu(console: Console, etudiants: EtudiantRepository) -> None:
    _section(console, "Supprimer un etudiant")
    numero = console.prompt("Entrez le numero de l'etudiant a supprimer : ")
    _attempt(
        console,
        lambda: etudiants.supprimer(numero),
        "Etudiant supprime !",
        NotFoundError,
        _NOT_FOUND,
    )


def chercher_etudiant_menu(console: Console, etudiants: EtudiantRepository) -> None:
    _section(console, "Rechercher un etudiant")
    e = etudiants.chercher(console.prompt("Entrez le numero de l'etudiant a rechercher : "))
    if e is None:
        console.write(_NOT_FOUND)
    else:
        console.write(
            f"Etudiant trouve : numero = {e.numero}, nom = {e.nom}, "
            f"prenom = {e.prenom}, email = {e.email}, "
            f"date naissance = {e.datenaissance}, classe = {e.code_classe}"
        )


def menu_etudiant(
    console: Console, etudiants: EtudiantRepository, classes: ClasseRepository
) -> None:
    """Run the student menu until the user chooses 0 or input ends."""
    _run_menu(
        console,
        "ETUDIANT",
        (
            ("Ajouter un etudiant", partial(ajouter_etudiant_menu, console, etudiants, classes)),
            ("Afficher les etudiants", partial(afficher_etudiant_menu, console, etudiants)),
            ("Modifier un etudiant", partial(modifier_etudiant_menu, console, etudiants, classes)),
            ("Supprimer un etudiant", partial(supprimer_etudiant_menu, console, etudiants)),
            ("Rechercher un etudiant", partial(chercher_etudiant_menu, console, etudiants)),
        ),
    )