"""Input validation helpers for records and search filters.

The store sends whatever it is given; callers run these before add/edit.
"""
from __future__ import annotations
import re

MATRICULA_PATTERN = re.compile(r"^[A-Za-z0-9-]{1,20}$")


def normalize_username(raw: str) -> str:
    """Normalize and validate username.

    Args:
        raw: Raw username input

    Returns:
        Normalized username

    Raises:
        ValueError: If username is invalid
    """
    normalized = "".join(char for char in raw.lower().strip() if char.isalnum() or char in {".", "-", "_"})

    if len(normalized) < 3:
        raise ValueError("Username must be at least 3 characters")
    if len(normalized) > 64:
        raise ValueError("Username must not exceed 64 characters")
    if normalized[0] in {".", "-", "_"} or normalized[-1] in {".", "-", "_"}:
        raise ValueError("Username cannot start or end with special characters")

    return normalized


def validate_name(name: str, field: str) -> str:
    """Validate name fields.

    Args:
        name: Name to validate
        field: Field name for error messages (e.g., "Nome")

    Returns:
        Trimmed name

    Raises:
        ValueError: If name is invalid
    """
    name = name.strip()
    if not name:
        raise ValueError(f"{field} is required")
    if len(name) > 128:
        raise ValueError(f"{field} exceeds maximum length")
    if any(char in name for char in "<>\"'`;&|$"):
        raise ValueError(f"{field} contains invalid characters")

    return name


def validate_cpf(raw: str) -> str:
    """Validate a CPF and return its 11 digits.

    Punctuation ("123.456.789-09") is accepted and stripped. Both check
    digits are verified; repeated-digit numbers are rejected.

    Raises:
        ValueError: If the CPF is invalid
    """
    digits = "".join(char for char in raw if char.isdigit())
    if len(digits) != 11:
        raise ValueError("CPF must have 11 digits")
    if digits == digits[0] * 11:
        raise ValueError("Invalid CPF")

    for position in (9, 10):
        total = sum(int(digits[i]) * (position + 1 - i) for i in range(position))
        check = (total * 10) % 11 % 10
        if check != int(digits[position]):
            raise ValueError("Invalid CPF")

    return digits


def validate_matricula(raw: str) -> str:
    """Validate an enrollment number (letters, digits and dashes)."""
    matricula = raw.strip().upper()
    if not MATRICULA_PATTERN.match(matricula):
        raise ValueError("Matricula must be 1-20 letters, digits or dashes")
    return matricula


def clean_name_filter(raw: str) -> str:
    """Keep only letters and spaces in a name search filter."""
    return "".join(char for char in raw if char.isalpha() or char == " ").strip()


def clean_username_filter(raw: str) -> str:
    """Keep only characters allowed in usernames in a username search filter."""
    return "".join(char for char in raw.lower() if char.isalnum() or char in {".", "-", "_"})


def validate_aluno(record: dict) -> dict:
    """Validate a student record before add/edit.

    Returns:
        Copy of the record with normalized ``nome``, ``cpf`` and ``matricula``

    Raises:
        ValueError: If a required field is missing or invalid
    """
    cleaned = dict(record)
    cleaned["nome"] = validate_name(str(record.get("nome", "")), "Nome")
    cleaned["cpf"] = validate_cpf(str(record.get("cpf", "")))
    if record.get("matricula"):
        cleaned["matricula"] = validate_matricula(str(record["matricula"]))
    return cleaned


def validate_admin(record: dict) -> dict:
    """Validate an administrator record before add/edit.

    Returns:
        Copy of the record with normalized ``username`` and ``nome``

    Raises:
        ValueError: If a required field is missing or invalid
    """
    cleaned = dict(record)
    cleaned["username"] = normalize_username(str(record.get("username", "")))
    cleaned["nome"] = validate_name(str(record.get("nome", "")), "Nome")
    return cleaned
