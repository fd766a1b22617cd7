import io

import pytest

from gestion_etudiants.classes import ClasseRepository
from gestion_etudiants.console import Console
from gestion_etudiants.menu_classe import (
    afficher_classe_menu,
    ajouter_classe_menu,
    chercher_classe_menu,
    menu_classe,
    modifier_classe_menu,
    supprimer_classe_menu,
)
from gestion_etudiants.models import Classe

INFO = Classe("C1", "Info", "L1")


def run(action, classes, text=""):
    """Run one menu action on scripted input; return its output and the clear count."""
    out = io.StringIO()
    clears = []
    action(Console(io.StringIO(text), out, lambda: clears.append(True)), classes)
    return out.getvalue(), len(clears)


@pytest.fixture
def classes(tmp_path):
    repo = ClasseRepository(tmp_path)
    repo.ajouter(INFO)
    return repo


@pytest.mark.parametrize(
    "action, text, message, expected",
    [
        (ajouter_classe_menu, "C2 Math L2\n", "Classe ajoutee !", [INFO, Classe("C2", "Math", "L2")]),
        (ajouter_classe_menu, "C1 Autre L2\n", "Classe deja enregistree.", [INFO]),
        (modifier_classe_menu, "C1 Maths M2\n", "Classe modifiee !", [Classe("C1", "Maths", "M2")]),
        (supprimer_classe_menu, "C1\n", "Classe supprimee !", []),
        (supprimer_classe_menu, "ZZ\n", "Classe non trouvee.", [INFO]),
    ],
)
def test_actions(classes, action, text, message, expected):
    output, _ = run(action, classes, text)
    assert message in output
    assert classes.lister() == expected


def test_afficher_lists_classes(classes):
    output, _ = run(afficher_classe_menu, classes)
    assert "--- Affichage des classes ---" in output
    assert "C1" in output and "Info" in output


def test_modifier_missing_asks_nothing_more(classes):
    output, _ = run(modifier_classe_menu, classes, "ZZ Maths M2\n")
    assert "Classe non trouvee." in output
    assert "Nouveau nom" not in output


@pytest.mark.parametrize(
    "code, message",
    [
        ("C1", "Classe trouvee : code = C1, nom = Info, niveau = L1"),
        ("C9", "Classe non trouvee."),
    ],
)
def test_chercher(classes, code, message):
    output, _ = run(chercher_classe_menu, classes, code + "\n")
    assert message in output


def test_menu_loop(tmp_path):
    classes = ClasseRepository(tmp_path)
    output, clears = run(menu_classe, classes, "1\nC1 Info L1\n9\nabc\n0\n")
    assert classes.chercher("C1") == INFO
    assert output.count("Choix invalide.") == 2
    assert output.rstrip().endswith("Retour au menu principal.")
    assert clears == 2


def test_menu_stops_at_end_of_input(classes):
    output, _ = run(menu_classe, classes, "2\n")
    assert output.count("--- MENU CLASSE ---") == 2