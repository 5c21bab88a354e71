"""Core client logic.

Module Structure:
    - api/          : HTTP transport and typed exceptions
    - resources/    : One collection handler per resource (admins, users,
                      students, courses, permissions)
    - store.py      : ResourceStore, the single owner of all collections
    - models.py     : Record shapes and user-row helpers
    - validators.py : Input validation for records and search filters

Usage:
    from painel_admin.core.api import ApiClient
    from painel_admin.core.store import ResourceStore

    store = ResourceStore(ApiClient("http://localhost:8080"))
    store.get_users()
    store.search_user(nome="ana")
"""
