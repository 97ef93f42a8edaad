"""Client-side join of people to the department they belong to.

``department_id`` is a soft reference: a department may be deleted while
students or teachers still point at it. Unresolved ids are rendered with a
sentinel label instead of raising.
"""
from typing import Iterable

from ..domain.entities import Department
from .dto import ViewRow

UNKNOWN_DEPARTMENT = "Unknown"


def department_lookup(departments: Iterable[Department]) -> dict[str, str]:
    return {d.id: d.name for d in departments}


def annotate(records: Iterable, lookup: dict[str, str], unknown: str = UNKNOWN_DEPARTMENT) -> list[ViewRow]:
    return [ViewRow(record=r, department_name=lookup.get(r.department_id, unknown)) for r in records]


def join_department_names(departments: Iterable[Department], records: Iterable,
                          unknown: str = UNKNOWN_DEPARTMENT) -> list[ViewRow]:
    # словарь строится один раз, без перебора кафедр на каждую строку
    return annotate(records, department_lookup(departments), unknown)
