import io

import pytest

from gestion_etudiants.console import Console
from gestion_etudiants.matieres import MatiereRepository
from gestion_etudiants.menu_matiere import (
    afficher_matiere_menu,
    ajouter_matiere_menu,
    chercher_matiere_menu,
    menu_matiere,
    modifier_matiere_menu,
    supprimer_matiere_menu,
)
from gestion_etudiants.models import Matiere

ALGEBRE = Matiere("M1", "Algebre", 2.0)


def run(action, matieres, text=""):
    """Run one menu action on scripted input and return what it printed."""
    out = io.StringIO()
    action(Console(io.StringIO(text), out, lambda: None), matieres)
    return out.getvalue()


@pytest.fixture
def empty(tmp_path):
    return MatiereRepository(tmp_path)


@pytest.fixture
def matieres(empty):
    empty.ajouter(ALGEBRE)
    return empty


@pytest.mark.parametrize(
    "text, message, expected",
    [
        ("M1 Algebre 2.5\n", "Matiere ajoutee !", [Matiere("M1", "Algebre", 2.5)]),
        ("M1 Algebre abc\n", "Coefficient invalide.", []),
    ],
)
def test_ajouter_on_empty(empty, text, message, expected):
    assert message in run(ajouter_matiere_menu, empty, text)
    assert empty.lister() == expected


def test_ajouter_duplicate(matieres):
    output = run(ajouter_matiere_menu, matieres, "M1 Autre 3\n")
    assert matieres.lister() == [ALGEBRE]
    assert "Matiere ajoutee !" not in output


@pytest.mark.parametrize(
    "action, text, message, expected",
    [
        (modifier_matiere_menu, "M1 Analyse 4\n", "Matiere modifiee !", [Matiere("M1", "Analyse", 4.0)]),
        (modifier_matiere_menu, "M9\n", "Matiere non trouvee.", [ALGEBRE]),
        (supprimer_matiere_menu, "M1\n", "Matiere supprimee !", []),
        (supprimer_matiere_menu, "M9\n", "Matiere non trouvee.", [ALGEBRE]),
    ],
)
def test_change_actions(matieres, action, text, message, expected):
    assert message in run(action, matieres, text)
    assert matieres.lister() == expected


def test_afficher(matieres):
    output = run(afficher_matiere_menu, matieres)
    assert "Reference" in output and "Algebre" in output


def test_chercher(matieres):
    output = run(chercher_matiere_menu, matieres, "M1\n")
    assert "reference = M1, libelle = Algebre, coefficient = 2.00" in output


def test_menu_loop(empty):
    output = run(menu_matiere, empty, "1 M1 Algebre 2\n4 M1\n7\n0\n")
    assert empty.lister() == []
    assert "Matiere supprimee !" in output
    assert output.count("Choix invalide.") == 1
    assert "Retour au menu principal." in output