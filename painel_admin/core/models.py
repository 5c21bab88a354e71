"""Record shapes exchanged with the backend, plus small helpers for user rows.

The store keeps whatever the server returns; these TypedDicts only document
the fields the views rely on.
"""
from __future__ import annotations
from typing import TypedDict, Union

ALUNO_TIPO = "Aluno"
ALUNO_EDIT_ROUTE = "/alunos/editar-aluno"
ADMIN_EDIT_ROUTE = "/administradores/editar-administrador"


class Admin(TypedDict, total=False):
    id: str
    username: str
    nome: str
    email: str
    telefone: str


class User(TypedDict, total=False):
    id: str
    username: str
    nome: str
    tipo: str
    status: Union[bool, str]


class Aluno(TypedDict, total=False):
    id: str
    nome: str
    cpf: str
    matricula: str


class Curso(TypedDict, total=False):
    id: str
    nome: str
    descricao: str


class Permission(TypedDict, total=False):
    id: str
    descricao: str
    role: str


def is_aluno(user: dict) -> bool:
    """Return True when the user row belongs to a student."""
    return user.get("tipo") == ALUNO_TIPO


def edit_route_for(user: dict) -> str:
    """Edit page for a user row: students and admins have separate forms."""
    return ALUNO_EDIT_ROUTE if is_aluno(user) else ADMIN_EDIT_ROUTE


def status_label(user: dict) -> str:
    """Display label for the user's status ("Ativo"/"Inativo").

    String codes such as "false", "0" or "inativo" count as inactive.
    """
    status = user.get("status")
    if isinstance(status, str):
        active = status.strip().lower() not in {"", "false", "0", "inativo", "inactive"}
    else:
        active = bool(status)
    return "Ativo" if active else "Inativo"
