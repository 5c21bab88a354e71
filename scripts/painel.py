"""Command-line front-end for the admin panel resource store.

This module serves as a CLI wrapper around painel_admin.core.store, playing
the part of the list/edit views: it validates input, calls one store action
and prints the result as JSON.

Examples:
    python scripts/painel.py courses search --nome "Física" --page 1
    python scripts/painel.py students add --data '{"nome": "Ana", "cpf": "52998224725"}'
    python scripts/painel.py users list --table
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from painel_admin.config import load_settings
from painel_admin.core.api import ApiError
from painel_admin.core.models import edit_route_for, status_label
from painel_admin.core.resources import EDIT_STRATEGIES
from painel_admin.core.store import ResourceStore
from painel_admin.core.validators import (
    clean_name_filter,
    clean_username_filter,
    validate_admin,
    validate_aluno,
)

# resource -> action -> store method
ACTIONS = {
    "admins": {
        "add": "add_admin",
        "edit": "edit_admin",
        "delete": "delete_admin",
    },
    "users": {
        "list": "get_users",
        "search": "search_user",
        "delete": "delete_user",
    },
    "students": {
        "list": "get_student",
        "search": "search_student",
        "add": "add_students",
        "edit": "edit_student",
        "delete": "delete_student",
    },
    "courses": {
        "list": "get_courses",
        "search": "search_course",
        "add": "add_course",
        "edit": "edit_course",
        "delete": "delete_course",
    },
    "permissions": {
        "list": "get_permissions",
        "search": "search_permission",
        "add": "add_permission",
        "edit": "edit_permission",
        "delete": "delete_permission",
    },
}

RECORD_VALIDATORS = {
    "admins": validate_admin,
    "students": validate_aluno,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Admin panel resource client")
    parser.add_argument("--api-url", help="Backend base URL (default: PAINEL_API_URL)")
    parser.add_argument("--token", help="Bearer token (default: PAINEL_API_TOKEN or /run/secrets)")
    parser.add_argument("--edit-strategy", choices=EDIT_STRATEGIES)

    sub = parser.add_subparsers(dest="resource")
    for resource, actions in ACTIONS.items():
        sp = sub.add_parser(resource)
        sp.add_argument("action", choices=sorted(actions))
        sp.add_argument("--id", dest="item_id", help="Identifier for edit/delete")
        sp.add_argument("--data", help="JSON record for add/edit")
        if "search" in actions:
            _add_search_filters(sp, resource)
        if resource == "users":
            sp.add_argument("--table", action="store_true", help="Print users as a table")
    return parser


def _add_search_filters(sp: argparse.ArgumentParser, resource: str) -> None:
    if resource == "users":
        sp.add_argument("--username", default="")
        sp.add_argument("--nome", default="")
        sp.add_argument("--status", default="")
    elif resource == "students":
        sp.add_argument("--nome", default="")
        sp.add_argument("--cpf", default="")
        sp.add_argument("--matricula", default="")
    elif resource == "courses":
        sp.add_argument("--nome", default="")
        sp.add_argument("--page", type=int, default=0)
        sp.add_argument("--size", type=int, default=10)
    elif resource == "permissions":
        sp.add_argument("--descricao", default="")


def _search_kwargs(args: argparse.Namespace) -> dict:
    if args.resource == "users":
        return {
            "username": clean_username_filter(args.username),
            "nome": clean_name_filter(args.nome),
            "status": args.status,
        }
    if args.resource == "students":
        return {"nome": clean_name_filter(args.nome), "cpf": args.cpf, "matricula": args.matricula}
    if args.resource == "courses":
        return {"nome": args.nome, "page": args.page, "size": args.size}
    return {"descricao": args.descricao}


def _load_record(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict:
    if not args.data:
        parser.error(f"{args.resource} {args.action} requires --data")
    try:
        record = json.loads(args.data)
    except ValueError as exc:
        parser.error(f"--data is not valid JSON: {exc}")
    if not isinstance(record, dict):
        parser.error("--data must be a JSON object")
    validator = RECORD_VALIDATORS.get(args.resource)
    return validator(record) if validator else record


def format_users_table(users: list) -> str:
    """Render user rows as the user list view shows them."""
    rows = [("USERNAME", "NOME", "TIPO", "STATUS", "EDITAR")]
    for user in users:
        rows.append((
            str(user.get("username", "")),
            str(user.get("nome", "")),
            str(user.get("tipo", "")),
            status_label(user),
            edit_route_for(user),
        ))
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = ["  ".join(value.ljust(widths[i]) for i, value in enumerate(row)).rstrip() for row in rows]
    lines.append(f"Total de usuários encontrados: {len(users)}")
    return "\n".join(lines)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser, store: ResourceStore):
    """Dispatch one CLI action to the store and return what should be printed."""
    method = getattr(store, ACTIONS[args.resource][args.action])

    if args.action == "list":
        method()
        return getattr(store, args.resource)
    if args.action == "search":
        return method(**_search_kwargs(args))
    if args.action == "add":
        return method(_load_record(args, parser))

    if not args.item_id:
        parser.error(f"{args.resource} {args.action} requires --id")
    if args.action == "edit":
        return method(args.item_id, _load_record(args, parser))
    return method(args.item_id)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.resource:
        parser.print_help()
        return 0

    try:
        config = load_settings()
    except ValueError as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    if args.api_url:
        config.api_url = args.api_url.rstrip("/")
    if args.token:
        config.api_token = args.token
    if args.edit_strategy:
        config.edit_strategy = args.edit_strategy

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    store = ResourceStore.from_settings(config)

    try:
        result = run(args, parser, store)
    except (ApiError, ValueError) as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1

    if args.resource == "users" and getattr(args, "table", False) and isinstance(result, list):
        print(format_users_table(result))
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
