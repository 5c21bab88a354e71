"""Course (curso) collection operations."""
from __future__ import annotations
from typing import List, Optional

from .base import ResourceCollection, build_query


class CourseService(ResourceCollection):
    """Service for the ``/cursos`` collection."""

    endpoint = "/cursos"

    def get_courses(self) -> None:
        """Replace the local collection with every course on the server."""
        self._fetch(self.endpoint)

    def search_course(self, nome: str = "", page: int = 0, size: int = 10) -> List[dict]:
        """Search courses by name, one page at a time.

        Args:
            nome: Name filter (omitted from the query when blank)
            page: Zero-based page index
            size: Page size

        Returns:
            Courses returned by the server (also stored locally)
        """
        endpoint = build_query(self.endpoint, [("nome", nome), ("page", page), ("size", size)])
        return self._fetch(endpoint)

    def add_course(self, new_course: dict) -> dict:
        return self._create(new_course)

    def edit_course(self, course_id: str, new_course: dict) -> dict:
        return self._update(course_id, new_course)

    def delete_course(self, course_id: str) -> Optional[dict]:
        return self._remove(course_id)
