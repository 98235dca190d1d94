"""
Capability-based authorization.

Each operation asks once whether the acting role holds the capability for
the entity type it touches, instead of every screen checking roles inline.

Usage:
    authorize(session, Action.DELETE, EntityType.BOOKS)
"""

import enum
from typing import Dict, FrozenSet, List

from campushub.core.exceptions import AuthorizationError
from campushub.core.session import Session, UserRole
from campushub.schemas.common import EntityType


class Action(str, enum.Enum):
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_ALL_ROLES = frozenset(UserRole)

VIEW_ROLES: Dict[EntityType, FrozenSet[UserRole]] = {
    EntityType.STUDENTS: frozenset({UserRole.ADMIN, UserRole.PRINCIPAL, UserRole.TEACHER}),
    EntityType.TEACHERS: frozenset({UserRole.ADMIN, UserRole.PRINCIPAL}),
    EntityType.TIMETABLE: frozenset({
        UserRole.ADMIN, UserRole.TEACHER, UserRole.STUDENT, UserRole.PARENT, UserRole.PRINCIPAL,
    }),
    EntityType.EXAMS: frozenset({
        UserRole.ADMIN, UserRole.TEACHER, UserRole.STUDENT, UserRole.PARENT, UserRole.PRINCIPAL,
    }),
    EntityType.BOOKS: frozenset({
        UserRole.ADMIN, UserRole.LIBRARIAN, UserRole.TEACHER, UserRole.STUDENT, UserRole.PRINCIPAL,
    }),
    EntityType.GALLERY: _ALL_ROLES,
    EntityType.NOTICES: _ALL_ROLES,
    EntityType.FEE_STRUCTURES: frozenset({UserRole.ADMIN, UserRole.ACCOUNTANT, UserRole.PRINCIPAL}),
    EntityType.FEE_RECORDS: frozenset({UserRole.ADMIN, UserRole.ACCOUNTANT, UserRole.PRINCIPAL}),
    EntityType.SALARIES: frozenset({UserRole.ADMIN, UserRole.ACCOUNTANT, UserRole.PRINCIPAL}),
    EntityType.LEAVE_REQUESTS: frozenset({UserRole.ADMIN, UserRole.PRINCIPAL, UserRole.TEACHER}),
}

# Every mutation on every collection is admin-only
MANAGE_ROLES: FrozenSet[UserRole] = frozenset({UserRole.ADMIN})

STUDY_QUESTION_ROLES: FrozenSet[UserRole] = frozenset({
    UserRole.ADMIN, UserRole.TEACHER, UserRole.STUDENT, UserRole.PRINCIPAL,
})


def can(role: UserRole, action: Action, entity_type: EntityType) -> bool:
    if action == Action.VIEW:
        return role in VIEW_ROLES.get(entity_type, frozenset())
    return role in MANAGE_ROLES


def can_view(role: UserRole, entity_type: EntityType) -> bool:
    return can(role, Action.VIEW, entity_type)


def can_create(role: UserRole, entity_type: EntityType) -> bool:
    return can(role, Action.CREATE, entity_type)


def can_update(role: UserRole, entity_type: EntityType) -> bool:
    return can(role, Action.UPDATE, entity_type)


def can_delete(role: UserRole, entity_type: EntityType) -> bool:
    return can(role, Action.DELETE, entity_type)


def can_generate_study_questions(role: UserRole) -> bool:
    return role in STUDY_QUESTION_ROLES


def visible_entity_types(role: UserRole) -> List[EntityType]:
    return [entity_type for entity_type in EntityType if can_view(role, entity_type)]


def authorize(session: Session, action: Action, entity_type: EntityType) -> None:
    """Raise AuthorizationError unless the session's role holds the capability"""
    if not can(session.role, action, entity_type):
        raise AuthorizationError(
            f"Role '{session.role.value}' may not {action.value} {entity_type.value.replace('_', ' ')}",
            action=action.value,
            entity_type=entity_type.value,
        )
