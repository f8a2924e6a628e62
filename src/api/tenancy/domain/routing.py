"""Domain-based routing between the public site and the admin panel.

``painel.example.com`` serves the admin panel; ``example.com`` serves the
public site. These helpers look only at the first hostname label and are
independent of tenant resolution.
"""

from __future__ import annotations

ADMIN_SUBDOMAINS: frozenset[str] = frozenset({"painel", "admin", "app"})

PUBLIC_ROUTES: tuple[str, ...] = (
    "/",
    "/imoveis",
    "/imovel",
    "/sobre",
    "/contato",
    "/favoritos",
)

ADMIN_ROOT = "/admin"


def _first_label(hostname: str) -> str:
    return hostname.split(".")[0].lower()


def is_admin_subdomain(hostname: str) -> bool:
    return _first_label(hostname) in ADMIN_SUBDOMAINS


def is_public_route(path: str) -> bool:
    for route in PUBLIC_ROUTES:
        if route == "/":
            if path == "/":
                return True
        elif path.startswith(route):
            return True
    return False


def should_redirect_to_admin(hostname: str, path: str) -> bool:
    """Public routes visited on an admin subdomain redirect to the panel."""
    return is_admin_subdomain(hostname) and is_public_route(path)


def public_url(hostname: str, path: str = "/") -> str:
    """URL of ``path`` on the public site.

    On an admin subdomain the admin label is dropped and an absolute URL
    is returned; elsewhere the path already points at the public site.
    """
    if not is_admin_subdomain(hostname):
        return path
    public_host = ".".join(hostname.split(".")[1:])
    return f"https://{public_host}{path}"


def admin_url(hostname: str, path: str = ADMIN_ROOT) -> str:
    """URL of ``path`` on the admin panel.

    Panel routes live at the root of the admin subdomain, so the
    ``/admin`` prefix is dropped.
    """
    panel_path = path.replace(ADMIN_ROOT, "", 1) or "/"
    if is_admin_subdomain(hostname):
        return panel_path
    return f"https://painel.{hostname}{panel_path}"
