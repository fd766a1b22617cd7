"""Interactive menu for marks."""

from __future__ import annotations

from .console import Console
from .etudiants import EtudiantRepository
from .matieres import MatiereRepository
from .models import Note
from .notes import NoteRepository, formater_notes
from .storage import DuplicateError, NotFoundError

_MENU = (
    "\n--- MENU NOTE ---",
    "1. Donner une note a un etudiant",
    "2. Afficher les notes",
    "3. Modifier une note",
    "4. Supprimer une note",
    "5. Rechercher une note",
    "0. Retour",
)


def _ask_key(console: Console) -> tuple[str, str]:
    numero = console.prompt("Entrez le numero de l'etudiant : ")
    reference = console.prompt("Entrez la reference de la matiere : ")
    return numero, reference


def ajouter_note_menu(
    console: Console,
    notes: NoteRepository,
    etudiants: EtudiantRepository,
    matieres: MatiereRepository,
) -> None:
    console.clear()
    console.write("\n--- Ajouter une note ---")
    numero = console.prompt("Numero etudiant : ")
    reference = console.prompt("Reference matiere : ")
    try:
        note_cc = console.prompt_float("Note CC : ")
        note_ds = console.prompt_float("Note DS : ")
    except ValueError:
        console.write("Note invalide.")
        return
    if etudiants.chercher(numero) is None:
        console.write("Etudiant non trouve. Ajout annule.")
        return
    if matieres.chercher(reference) is None:
        console.write("Matiere non trouvee. Ajout annule.")
        return
    try:
        notes.ajouter(Note(numero, reference, note_cc, note_ds))
    except DuplicateError:
        console.write("Note deja enregistree.")
    else:
        console.write("Note ajoutee !")


def afficher_note_menu(console: Console, notes: NoteRepository) -> None:
    console.clear()
    console.write("\n--- Affichage des notes ---")
    console.write(formater_notes(notes.lister()))


def modifier_note_menu(console: Console, notes: NoteRepository) -> None:
    console.clear()
    console.write("\n--- Modifier une note ---")
    numero, reference = _ask_key(console)
    if notes.chercher(numero, reference) is None:
        console.write("Note non trouvee.")
        return
    try:
        note_cc = console.prompt_float("Nouvelle note CC : ")
        note_ds = console.prompt_float("Nouvelle note DS : ")
    except ValueError:
        console.write("Note invalide.")
        return
    try:
        notes.modifier(numero, reference, note_cc, note_ds)
    except NotFoundError:
        console.write("Note non trouvee.")
    else:
        console.write("Note modifiee !")


def supprimer_note_menu(console: Console, notes: NoteRepository) -> None:
    console.clear()
    console.write("\n--- Supprimer une note ---")
    numero, reference = _ask_key(console)
    try:
        notes.supprimer(numero, reference)
    except NotFoundError:
        console.write("Note non trouvee.")
    else:
        console.write("Note supprimee !")


def chercher_note_menu(console: Console, notes: NoteRepository) -> None:
    console.clear()
    console.write("\n--- Rechercher une note ---")
    numero, reference = _ask_key(console)
    note = notes.chercher(numero, reference)
    if note is None:
        console.write("Note non trouvee.")
    else:
        console.write(
            f"Note trouvee : numero = {note.numero_etudiant}, "
            f"matiere = {note.reference_matiere}, noteCC = {note.note_cc:.2f}, "
            f"noteDS = {note.note_ds:.2f} "
        )


def menu_note(
    console: Console,
    notes: NoteRepository,
    etudiants: EtudiantRepository,
    matieres: MatiereRepository,
) -> None:
    """Run the marks menu until the user chooses 0 or input ends."""
    actions = {
        1: lambda: ajouter_note_menu(console, notes, etudiants, matieres),
        2: lambda: afficher_note_menu(console, notes),
        3: lambda: modifier_note_menu(console, notes),
        4: lambda: supprimer_note_menu(console, notes),
        5: lambda: chercher_note_menu(console, notes),
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
            action()
        except EOFError:
            return