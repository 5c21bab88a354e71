"""Per-resource collection handlers.

- base.py: shared request building, failure policy and collection mutation
- admins.py, users.py, students.py, courses.py, permissions.py: one handler each
"""
from .base import (
    ResourceCollection,
    build_query,
    EDIT_APPEND,
    EDIT_REPLACE,
    EDIT_STRATEGIES,
)
from .admins import AdminService
from .users import UserService
from .students import StudentService
from .courses import CourseService
from .permissions import PermissionService

__all__ = [
    "ResourceCollection",
    "build_query",
    "EDIT_APPEND",
    "EDIT_REPLACE",
    "EDIT_STRATEGIES",
    "AdminService",
    "UserService",
    "StudentService",
    "CourseService",
    "PermissionService",
]
