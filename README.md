# gestion_etudiants

A small interactive console application for managing a school's records:
students (*étudiants*), classes, subjects (*matières*), grades (*notes*) and
the subjects taught in each class (*associations matière-classe*).

Everything is kept in plain CSV files. There is one file per kind of record,
and each file starts with a header line.

## Installation

```
pip install .
```

## Usage

Start the application:

```
gestion-etudiants
```

By default the CSV files are read from and written to `data/` in the current
directory. Another directory can be given:

```
gestion-etudiants --data-dir /path/to/records
```

The main menu offers:

1. Gerer les etudiants: add, list, modify, delete or search students
2. Gerer les matieres: manage subjects with a reference, label and coefficient
3. Gerer les classes: manage classes with a code, name and level
4. Gerer les notes: record continuous-assessment (CC) and exam (DS) grades
5. Gerer les associations matiere-classe: link subjects to classes
0. Quitter

Each sub-menu returns to the main menu with `0`. The program also stops when
its input ends.

Answers are read word by word, so a value cannot contain spaces, and several
answers may be typed on one line.

Checks made from the menus:

- A student can only be added or moved to a class that already exists.
- A grade can only be given to an existing student, for an existing subject.
- A subject-class link needs both the subject and the class to exist.
- Duplicate identifiers are refused.

Searching for a student whose class no longer exists reports the student as
not found.

## Data files

| File             | Columns                                               |
|------------------|-------------------------------------------------------|
| `classes.csv`    | code, nom, niveau                                     |
| `matieres.csv`   | reference, libelle, coefficient                       |
| `etudiants.csv`  | numero, nom, prenom, email, datenaissance, codeClasse |
| `notes.csv`      | numeroEtudiant, referenceMatiere, noteCC, noteDS      |
| `sefaire.csv`    | referenceMatiere, codeClasse                          |

A file is created, with its header, when its first record is added. Fields
are not quoted; only the last column may contain commas. Coefficients and
grades are written with two decimal places. Reading a file stops at the first
malformed line.

## Using it as a library

The repositories in `gestion_etudiants.classes`, `.matieres`, `.etudiants`,
`.notes` and `.associations` can be used without the menus:

```python
from gestion_etudiants.classes import ClasseRepository
from gestion_etudiants.models import Classe

classes = ClasseRepository("data")
classes.ajouter(Classe(code="L1A", nom="Licence1", niveau="L1"))
print(classes.chercher("L1A"))
```

`ClasseRepository`, `MatiereRepository`, `EtudiantRepository` and
`NoteRepository` offer `ajouter`, `lister`, `modifier`, `supprimer` and
`chercher`; `AssociationRepository` offers `associer`, `lister`, `supprimer`
and `chercher`. `chercher` returns `None` when nothing matches. A failed
operation raises `DuplicateError` or `NotFoundError`, both found in
`gestion_etudiants.storage`.

At this level, `EtudiantRepository.ajouter` does not check that the class
exists and `NoteRepository.ajouter` does not check the student or the subject;
those checks are made by the menus. `EtudiantRepository.modifier` and
`AssociationRepository.associer` do check what they refer to.

## What it does not do

- It does not compute averages, rankings or report cards from the grades.
- Deleting a class, subject or student leaves the records that refer to it
  in place.
- The files are not locked; the application is meant for one user at a time.

## Tests

```
pip install .[test]
pytest
```