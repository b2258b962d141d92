"""Repository interfaces for contacts and follow-ups, with in-memory stores."""

from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel

from .schemas.follow_up import Contact, FollowUp

ModelT = TypeVar("ModelT", bound=BaseModel)


class ContactStore(Protocol):
    """Persistence for payer and TPA contacts."""

    def get(self, contact_id: str) -> Contact | None: ...

    def list(self) -> list[Contact]: ...

    def put(self, contact: Contact) -> Contact: ...

    def delete(self, contact_id: str) -> bool: ...


class FollowUpStore(Protocol):
    """Persistence for follow-up tasks."""

    def get(self, follow_up_id: str) -> FollowUp | None: ...

    def list(self) -> list[FollowUp]: ...

    def put(self, follow_up: FollowUp) -> FollowUp: ...

    def delete(self, follow_up_id: str) -> bool: ...


class _InMemoryStore(Generic[ModelT]):
    """Dict-backed store keyed by the model's ``id``.

    Items are copied on the way in and out so callers never hold a reference
    to stored state.
    """

    def __init__(self, items: list[ModelT] | None = None) -> None:
        self._items: dict[str, ModelT] = {}
        for item in items or []:
            self.put(item)

    def get(self, item_id: str) -> ModelT | None:
        item = self._items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    def list(self) -> list[ModelT]:
        return [item.model_copy(deep=True) for item in self._items.values()]

    def put(self, item: ModelT) -> ModelT:
        self._items[item.id] = item.model_copy(deep=True)
        return item.model_copy(deep=True)

    def delete(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None


class InMemoryContactStore(_InMemoryStore[Contact]):
    """Contact store held in process memory."""


class InMemoryFollowUpStore(_InMemoryStore[FollowUp]):
    """Follow-up store held in process memory."""
