"""
Roster service

Loads faculty, staff and student records for the admin control panel and
filters them with a single predicate-combination routine shared by all three
rosters.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple
from nodue.models import (
    db, StudentProfile, StaffProfile, UserRole, Batch, FACULTY_ROLES, STAFF_ROLES
)
from nodue.utils.validators import ALL, normalize_criterion

EXACT = 'exact'
CONTAINS = 'contains'


class Dimension(NamedTuple):
    accessor: Callable[[Mapping[str, Any]], Any]
    match: str = EXACT


class RosterSchema(NamedTuple):
    """Which fields a roster searches and which categorical filters it offers"""
    search_fields: Tuple[str, ...]
    dimensions: Dict[str, Dimension]


def field(name: str) -> Callable[[Mapping[str, Any]], Any]:
    return lambda record: record.get(name)


FACULTY_SCHEMA = RosterSchema(
    search_fields=('name', 'employee_id', 'email'),
    dimensions={
        'department': Dimension(field('department')),
        'designation': Dimension(field('designation')),
    },
)

STAFF_SCHEMA = RosterSchema(
    search_fields=('name', 'employee_id', 'email'),
    dimensions={
        'department': Dimension(field('department')),
        'role': Dimension(field('roles'), CONTAINS),
    },
)

STUDENT_SCHEMA = RosterSchema(
    search_fields=('name', 'usn', 'email'),
    dimensions={
        'semester': Dimension(field('semester')),
        'department': Dimension(field('department')),
        'batch': Dimension(field('batch')),
    },
)


def matches_search(record: Mapping[str, Any], term: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of the search fields"""
    term = term.lower()
    for name in fields:
        value = record.get(name)
        if value and term in str(value).lower():
            return True
    return False


def matches_dimension(record: Mapping[str, Any], dimension: Dimension, expected: str) -> bool:
    value = dimension.accessor(record)
    if value is None:
        return False
    if dimension.match == CONTAINS:
        return expected in {str(item) for item in value}
    return str(value) == expected


def filter_roster(records: Iterable[Mapping[str, Any]], criteria: Mapping[str, Optional[str]],
                  schema: RosterSchema) -> List[Mapping[str, Any]]:
    """
    Filter roster records

    Args:
        records: Person records as dictionaries
        criteria: "search" plus any of the schema's dimensions; a blank
            search is skipped, as are dimensions set to "all", blank or missing
        schema: Roster schema describing searchable fields and dimensions

    Returns:
        Records passing every active criterion, in their original order
    """
    term = (criteria.get('search') or '').strip()
    active = []
    for name, dimension in schema.dimensions.items():
        expected = normalize_criterion(criteria.get(name))
        if expected != ALL:
            active.append((dimension, expected))

    filtered = []
    for record in records:
        if term and not matches_search(record, term, schema.search_fields):
            continue
        if all(matches_dimension(record, dimension, expected) for dimension, expected in active):
            filtered.append(record)
    return filtered


def _roles_by_user(roles: Iterable[str]) -> Dict[str, List[str]]:
    grants = UserRole.query.filter(UserRole.role.in_(list(roles))).order_by(UserRole.id).all()
    by_user: Dict[str, List[str]] = {}
    for grant in grants:
        by_user.setdefault(grant.user_id, []).append(grant.role)
    return by_user


def _staff_with_roles(roles: Iterable[str]) -> List[Dict[str, Any]]:
    by_user = _roles_by_user(roles)
    if not by_user:
        return []
    profiles = (StaffProfile.query
                .filter(StaffProfile.id.in_(list(by_user)))
                .order_by(StaffProfile.name)
                .all())
    return [profile.to_dict(roles=by_user[profile.id]) for profile in profiles]


def list_faculty() -> List[Dict[str, Any]]:
    """Staff profiles holding a faculty or HOD role, ordered by name"""
    return _staff_with_roles(FACULTY_ROLES)


def list_staff() -> List[Dict[str, Any]]:
    """Staff profiles holding a non-teaching clearance role, ordered by name"""
    return _staff_with_roles(STAFF_ROLES)


def list_students() -> List[Dict[str, Any]]:
    return [student.to_dict() for student in StudentProfile.query.order_by(StudentProfile.name).all()]


def list_batches() -> List[str]:
    return [name for (name,) in db.session.query(Batch.name).order_by(Batch.name).all()]


def roster_page(records: List[Mapping[str, Any]], criteria: Mapping[str, Optional[str]],
                schema: RosterSchema) -> Dict[str, Any]:
    """Filtered records along with the totals shown above the table"""
    filtered = filter_roster(records, criteria, schema)
    return {
        'records': filtered,
        'total': len(records),
        'shown': len(filtered),
    }
