"""Student (aluno) collection operations."""
from __future__ import annotations
from typing import List, Optional

from .base import ResourceCollection, build_query


class StudentService(ResourceCollection):
    """Service for the ``/alunos`` collection."""

    endpoint = "/alunos"

    def get_student(self) -> None:
        """Replace the local collection with every student on the server."""
        self._fetch(self.endpoint)

    def search_student(self, nome: str = "", cpf: str = "", matricula: str = "") -> List[dict]:
        """Search students by name, CPF and/or enrollment number.

        Blank filters are left out of the query, so
        ``search_student("", "", "M12345")`` requests ``/alunos?matricula=M12345``.

        Returns:
            Students returned by the server (also stored locally)
        """
        endpoint = build_query(
            self.endpoint,
            [("nome", nome), ("matricula", matricula), ("cpf", cpf)],
        )
        return self._fetch(endpoint)

    def add_students(self, new_student: dict) -> dict:
        return self._create(new_student)

    def edit_student(self, student_id: str, new_student: dict) -> dict:
        return self._update(student_id, new_student)

    def delete_student(self, student_id: str) -> Optional[dict]:
        return self._remove(student_id)
