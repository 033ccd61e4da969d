"""Owner-only authorization for user-owned resources."""

from typing import TypeVar

from sqlalchemy.orm import Session

from markers_api.errors import ForbiddenError, NotFoundError

ModelT = TypeVar("ModelT")


def get_owned_or_raise(
    db: Session,
    model: type[ModelT],
    resource_id: int,
    user_id: int,
    label: str = "Resource",
) -> ModelT:
    """Fetch a resource the caller may mutate.

    Existence is checked before ownership: a missing id is a 404 for
    everyone, and only an existing resource owned by someone else is a 403.
    """
    resource = db.query(model).filter(model.id == resource_id).first()
    if resource is None:
        raise NotFoundError(f"{label} not found")

    if resource.user_id != user_id:
        raise ForbiddenError(f"You don't have permission to modify this {label.lower()}")

    return resource
