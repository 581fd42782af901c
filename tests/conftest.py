"""Shared record fixtures."""

import pytest

from file_forest.models import FileRecord


def make_records(rows):
    """Build records from ``(id, name, categories, parent, size)`` tuples."""
    return [
        FileRecord(id=i, name=n, categories=c, parent=p, size=s)
        for i, n, c, p, s in rows
    ]


@pytest.fixture
def one_layer():
    """One root with four direct children."""
    return make_records([
        (1, "1", ["Documents"], -1, 1024),
        (2, "2", ["Documents"], 1, 1024),
        (3, "3", ["Documents"], 1, 1024),
        (4, "4", ["Documents"], 1, 1024),
        (5, "5", ["Documents"], 1, 1024),
    ])


@pytest.fixture
def multi_layer():
    """Three roots with nested children of varying depth."""
    return make_records([
        (1, "1", ["Documents"], -1, 1024),
        (2, "2", ["Documents"], -1, 1024),
        (3, "3", ["Documents"], -1, 1024),
        (4, "4", ["Documents"], 1, 1024),
        (5, "5", ["Documents"], 1, 1024),
        (6, "6", ["Documents"], 2, 1024),
        (7, "7", ["Documents"], 6, 1024),
        (8, "8", ["Documents"], 2, 1024),
        (9, "9", ["Documents"], 7, 1024),
        (10, "10", ["Documents"], 4, 1024),
    ])


@pytest.fixture
def nested_categories():
    """Root-only records with growing category lists."""
    return make_records([
        (1, "1", ["b", "a"], -1, 1024),
        (2, "2", ["b", "a"], -1, 1024),
        (3, "3", ["b", "a", "c"], -1, 1024),
        (4, "4", ["b", "a", "c", "d"], -1, 1024),
        (5, "5", ["b", "a", "c", "d", "f"], -1, 1024),
        (6, "6", ["b", "a", "c", "d", "e"], -1, 1024),
    ])


@pytest.fixture
def mixed_case_categories():
    """Four records sharing the same mixed-case tags."""
    return make_records([
        (i, str(i), ["A", "d", "e", "C", "b"], -1, 1024) for i in range(1, 5)
    ])


TREE_A = [
    (1, "1", None, -1, 1024),
    (2, "2", None, 1, 2000),
    (3, "3", None, 1, 3000),
    (4, "4", None, 1, 2000),
    (5, "5", None, 4, 2000),
]

TREE_B = [
    (6, "6", None, 9, 6044),
    (7, "7", None, 6, 10000),
    (8, "8", None, 7, 10000),
    (9, "9", None, -1, 10000),
]


@pytest.fixture
def tree_a():
    """Root 1 whose subtree totals 10024."""
    return make_records(TREE_A)


@pytest.fixture
def tree_b():
    """Chain rooted at 9 whose subtree totals 36044."""
    return make_records(TREE_B)


@pytest.fixture
def two_trees():
    return make_records(TREE_A + TREE_B)


@pytest.fixture
def sample_drive():
    """A small drive listing with folders, files and several roots."""
    return make_records([
        (1, "Document.txt", ["Documents"], 3, 1024),
        (2, "Image.jpg", ["Media", "Photos"], 34, 2048),
        (3, "Folder", ["Folder"], -1, 0),
        (5, "Spreadsheet.xlsx", ["Documents", "Excel"], 3, 4096),
        (8, "Backup.zip", ["Backup"], 233, 8192),
        (13, "Presentation.pptx", ["Documents", "Presentation"], 3, 3072),
        (21, "Video.mp4", ["Media", "Videos"], 34, 6144),
        (34, "Folder2", ["Folder"], 3, 0),
        (55, "Code.py", ["Programming"], -1, 1536),
        (89, "Audio.mp3", ["Media", "Audio"], 34, 2560),
        (144, "Spreadsheet2.xlsx", ["Documents", "Excel"], 3, 2048),
        (233, "Folder3", ["Folder"], -1, 4096),
    ])
