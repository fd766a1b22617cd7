"""Console management of students, classes, subjects, grades and subject-class links in CSV files."""

__version__ = "1.0.0"