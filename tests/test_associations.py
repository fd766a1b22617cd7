import pytest

from gestion_etudiants.associations import AssociationRepository, formater_associations
from gestion_etudiants.classes import ClasseRepository
from gestion_etudiants.matieres import MatiereRepository
from gestion_etudiants.models import Classe, Matiere, SeFaire
from gestion_etudiants.storage import DuplicateError, NotFoundError


@pytest.fixture
def repo(tmp_path):
    classes = ClasseRepository(tmp_path)
    for classe in (Classe("L1", "Licence1", "Bac+1"), Classe("L2", "Licence2", "Bac+2")):
        classes.ajouter(classe)
    matieres = MatiereRepository(tmp_path)
    for matiere in (Matiere("M1", "Maths", 2.0), Matiere("M2", "Physique", 1.5)):
        matieres.ajouter(matiere)
    return AssociationRepository(tmp_path, matieres, classes)


def test_associer_then_chercher(repo):
    assert repo.associer("M1", "L1") == SeFaire("M1", "L1")
    assert repo.chercher("M1", "L1") == SeFaire("M1", "L1")
    assert repo.chercher("M1", "L2") is None


def test_associer_duplicate(repo):
    repo.associer("M1", "L1")
    with pytest.raises(DuplicateError):
        repo.associer("M1", "L1")
    assert repo.lister() == [SeFaire("M1", "L1")]


@pytest.mark.parametrize(
    "reference, code, missing", [("MX", "L1", "Matiere"), ("M1", "LX", "Classe")]
)
def test_associer_unknown_side(repo, reference, code, missing):
    with pytest.raises(NotFoundError, match=missing):
        repo.associer(reference, code)
    assert repo.lister() == []


def test_lister_order(repo):
    pairs = [("M1", "L1"), ("M2", "L1"), ("M1", "L2")]
    for pair in pairs:
        repo.associer(*pair)
    assert repo.lister() == [SeFaire(*pair) for pair in pairs]


def test_chercher_with_crlf_file(repo, tmp_path):
    (tmp_path / "sefaire.csv").write_bytes(
        b"referenceMatiere,codeClasse\r\nM1,L1\r\nM2,L2\r\n"
    )
    assert repo.chercher("M2", "L2") == SeFaire("M2", "L2")


def test_supprimer(repo):
    repo.associer("M1", "L1")
    repo.associer("M2", "L2")
    repo.supprimer("M1", "L1")
    assert repo.lister() == [SeFaire("M2", "L2")]
    with pytest.raises(NotFoundError):
        repo.supprimer("M1", "L2")
    assert repo.lister() == [SeFaire("M2", "L2")]


def test_formater_associations():
    header, row = formater_associations([SeFaire("M1", "L1")]).split("\n")
    assert header.startswith("Reference Matiere")
    assert "Code Classe" in header
    assert row.split() == ["M1", "L1"]