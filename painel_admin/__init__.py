"""Admin panel client package.

To use the resource store:
    from painel_admin.core.store import ResourceStore

To use the HTTP transport directly:
    from painel_admin.core.api import ApiClient, ApiRequest
"""
