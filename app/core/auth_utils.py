"""Authorization helpers shared by the services"""
from app.core.errors import NotFoundError


def filter_by_owner(query, owner_column, identity):
    """Restrict ``query`` to rows owned by ``identity`` unless it is an admin.

    The identity id is bound as a statement parameter.
    """
    if identity.is_admin:
        return query
    return query.where(owner_column == identity.id)


def check_not_found(item, resource_name: str = "Resource") -> None:
    if not item:
        raise NotFoundError(f"{resource_name} not found")
