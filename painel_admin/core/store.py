"""Resource store: the single owner of the five cached collections.

Views read ``store.courses`` and friends (copies) and go through the store
actions for every change. Each action maps to one request:

    list    GET    /{resource}            replace collection
    search  GET    /{resource}?filters    replace collection, return result
    add     POST   /{resource}            append server record
    edit    PUT    /{resource}/{id}       append (or upsert) server record
    delete  DELETE /{resource}/{id}       drop every entry with that id
"""
from __future__ import annotations
from typing import Any, List, Optional, Union

from .api.client import ApiClient
from .resources import (
    AdminService,
    CourseService,
    PermissionService,
    StudentService,
    UserService,
    EDIT_APPEND,
)
from .resources.base import Transport


class ResourceStore:
    """Five independent collections and their synchronization actions.

    Usage:
        store = ResourceStore(ApiClient("http://localhost:8080"))
        store.get_courses()
        found = store.search_student(matricula="M12345")
    """

    def __init__(self, transport: Optional[Transport] = None, edit_strategy: str = EDIT_APPEND):
        """Initialize store.

        Args:
            transport: Request callable (defaults to an ApiClient from env vars)
            edit_strategy: "append" (legacy) or "replace"; applies to every collection
        """
        self.transport = transport if transport is not None else ApiClient()
        self.admin_service = AdminService(self.transport, edit_strategy)
        self.user_service = UserService(self.transport, edit_strategy)
        self.student_service = StudentService(self.transport, edit_strategy)
        self.course_service = CourseService(self.transport, edit_strategy)
        self.permission_service = PermissionService(self.transport, edit_strategy)

    @classmethod
    def from_settings(cls, config) -> "ResourceStore":
        """Build a store with an ApiClient configured from ``AppConfig``."""
        client = ApiClient(config.api_url, token=config.api_token if config.has_token else None, timeout=config.request_timeout)
        return cls(client, edit_strategy=config.edit_strategy)

    # ─────────────────────────────────────────────────────────────────────
    # Collections (read-only copies)
    # ─────────────────────────────────────────────────────────────────────

    @property
    def admins(self) -> List[dict]:
        return self.admin_service.items

    @property
    def users(self) -> List[dict]:
        return self.user_service.items

    @property
    def students(self) -> List[dict]:
        return self.student_service.items

    @property
    def courses(self) -> List[dict]:
        return self.course_service.items

    @property
    def permissions(self) -> List[dict]:
        return self.permission_service.items

    # ─────────────────────────────────────────────────────────────────────
    # Admins
    # ─────────────────────────────────────────────────────────────────────

    def add_admin(self, new_admin: dict) -> dict:
        return self.admin_service.add_admin(new_admin)

    def edit_admin(self, admin_id: str, new_admin: dict) -> dict:
        return self.admin_service.edit_admin(admin_id, new_admin)

    def delete_admin(self, admin_id: str) -> Any:
        return self.admin_service.delete_admin(admin_id)

    # ─────────────────────────────────────────────────────────────────────
    # Users
    # ─────────────────────────────────────────────────────────────────────

    def get_users(self) -> None:
        self.user_service.get_users()

    def search_user(self, username: str = "", nome: str = "", status: Union[str, bool, None] = "") -> List[dict]:
        return self.user_service.search_user(username, nome, status)

    def delete_user(self, user_id: str) -> Any:
        return self.user_service.delete_user(user_id)

    # ─────────────────────────────────────────────────────────────────────
    # Students
    # ─────────────────────────────────────────────────────────────────────

    def get_student(self) -> None:
        self.student_service.get_student()

    def search_student(self, nome: str = "", cpf: str = "", matricula: str = "") -> List[dict]:
        return self.student_service.search_student(nome, cpf, matricula)

    def add_students(self, new_student: dict) -> dict:
        return self.student_service.add_students(new_student)

    def edit_student(self, student_id: str, new_student: dict) -> dict:
        return self.student_service.edit_student(student_id, new_student)

    def delete_student(self, student_id: str) -> Any:
        return self.student_service.delete_student(student_id)

    # ─────────────────────────────────────────────────────────────────────
    # Courses
    # ─────────────────────────────────────────────────────────────────────

    def get_courses(self) -> None:
        self.course_service.get_courses()

    def search_course(self, nome: str = "", page: int = 0, size: int = 10) -> List[dict]:
        return self.course_service.search_course(nome, page, size)

    def add_course(self, new_course: dict) -> dict:
        return self.course_service.add_course(new_course)

    def edit_course(self, course_id: str, new_course: dict) -> dict:
        return self.course_service.edit_course(course_id, new_course)

    def delete_course(self, course_id: str) -> Any:
        return self.course_service.delete_course(course_id)

    # ─────────────────────────────────────────────────────────────────────
    # Permissions
    # ─────────────────────────────────────────────────────────────────────

    def get_permissions(self) -> None:
        self.permission_service.get_permissions()

    def search_permission(self, descricao: str = "") -> List[dict]:
        return self.permission_service.search_permission(descricao)

    def add_permission(self, new_permission: dict) -> dict:
        return self.permission_service.add_permission(new_permission)

    def edit_permission(self, permission_id: str, new_permission: dict) -> dict:
        return self.permission_service.edit_permission(permission_id, new_permission)

    def delete_permission(self, permission_id: str) -> Any:
        return self.permission_service.delete_permission(permission_id)
