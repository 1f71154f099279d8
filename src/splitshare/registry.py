"""In-memory lookup tables for users and groups."""

from __future__ import annotations

from typing import Generic, TypeVar

from splitshare.errors import DuplicateId, NotFound
from splitshare.models import User
from splitshare.services.groups import Group

T = TypeVar("T")


class _Registry(Generic[T]):
    kind = "item"

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def _add(self, key: str, item: T) -> T:
        if key in self._items:
            raise DuplicateId(f"{self.kind} {key} already exists")
        self._items[key] = item
        return item

    def get(self, key: str) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise NotFound(f"{self.kind} {key} not found") from None

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def list_all(self) -> list[T]:
        return list(self._items.values())


class UserRegistry(_Registry[User]):
    kind = "user"

    def add(self, user: User) -> User:
        return self._add(user.user_id, user)


class GroupRegistry(_Registry[Group]):
    kind = "group"

    def add(self, group: Group) -> Group:
        return self._add(group.group_id, group)
