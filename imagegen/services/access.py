# imagegen/services/access.py
from typing import Iterable, Protocol


class Owned(Protocol):
    user_id: int


def is_owner(resource: Owned, requester_id: int) -> bool:
    return resource.user_id == requester_id


def is_public(resource) -> bool:
    return bool(getattr(resource, "is_public", False))


def any_public(resources: Iterable) -> bool:
    return any(is_public(r) for r in resources)
