import pytest

from gestion_etudiants.matieres import MatiereRepository, formater_matieres
from gestion_etudiants.models import Matiere
from gestion_etudiants.storage import DuplicateError, GestionError, NotFoundError


@pytest.fixture
def repo(tmp_path):
    return MatiereRepository(tmp_path)


def test_add_then_find(repo):
    matiere = Matiere("MATH", "Algebre", 3.0)
    repo.ajouter(matiere)
    assert repo.chercher("MATH") == matiere


def test_coefficient_stored_with_two_decimals(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 1.234))
    assert repo.chercher("MATH").coefficient == pytest.approx(1.23)


def test_list_keeps_insertion_order(repo):
    first = Matiere("MATH", "Algebre", 3.0)
    second = Matiere("PHYS", "Physique", 2.0)
    repo.ajouter(first)
    repo.ajouter(second)
    assert repo.lister() == [first, second]


def test_duplicate_rejected(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 3.0))
    with pytest.raises(DuplicateError):
        repo.ajouter(Matiere("MATH", "Analyse", 2.0))
    assert repo.lister() == [Matiere("MATH", "Algebre", 3.0)]


def test_find_without_file(repo):
    assert repo.chercher("MATH") is None
    assert repo.lister() == []


def test_modify(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 3.0))
    repo.ajouter(Matiere("PHYS", "Physique", 2.0))
    result = repo.modifier("MATH", "Analyse", 4.0)
    assert result == Matiere("MATH", "Analyse", 4.0)
    assert repo.lister() == [Matiere("MATH", "Analyse", 4.0), Matiere("PHYS", "Physique", 2.0)]


def test_modify_unknown(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 3.0))
    with pytest.raises(NotFoundError):
        repo.modifier("ZZZ", "X", 1.0)
    assert repo.lister() == [Matiere("MATH", "Algebre", 3.0)]


def test_modify_without_file(repo):
    with pytest.raises(GestionError):
        repo.modifier("MATH", "X", 1.0)


def test_delete(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 3.0))
    repo.ajouter(Matiere("PHYS", "Physique", 2.0))
    repo.supprimer("MATH")
    assert repo.lister() == [Matiere("PHYS", "Physique", 2.0)]


def test_delete_unknown(repo):
    repo.ajouter(Matiere("MATH", "Algebre", 3.0))
    with pytest.raises(NotFoundError):
        repo.supprimer("ZZZ")
    assert repo.chercher("MATH") == Matiere("MATH", "Algebre", 3.0)


def test_malformed_line_stops_reading(tmp_path):
    (tmp_path / "matieres.csv").write_text(
        "reference,libelle,coefficient\nMATH,Algebre,3.00\nPHYS,Physique,abc\nCHIM,Chimie,1.00\n",
        encoding="utf-8",
    )
    assert MatiereRepository(tmp_path).lister() == [Matiere("MATH", "Algebre", 3.0)]


def test_format_table():
    lines = formater_matieres([Matiere("M1", "Maths", 2.5)]).splitlines()
    assert lines[0].split() == ["Reference", "Libelle", "Coefficient"]
    assert lines[1].split() == ["M1", "Maths", "2.50"]
    assert lines[1].index("Maths") == lines[0].index("Libelle")
    assert lines[1].index("2.50") == lines[0].index("Coefficient")


def test_format_empty_is_header_only():
    assert len(formater_matieres([]).splitlines()) == 1