"""Persistence helpers for key-value entries."""

from __future__ import annotations

from sqlalchemy.orm import Session

from vetportal.infrastructure.models import KeyValueEntryModel


class KeyValueRepository:
    """Provide get/upsert/delete operations over :class:`KeyValueEntryModel`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> str | None:
        model = self.session.get(KeyValueEntryModel, key)
        if model is None:
            return None
        return model.value

    def upsert(self, key: str, value: str) -> None:
        model = self.session.get(KeyValueEntryModel, key)
        if model is None:
            model = KeyValueEntryModel(key=key, value=value)
        else:
            model.value = value
        self.session.add(model)
        self.session.commit()

    def delete(self, key: str) -> None:
        self.session.query(KeyValueEntryModel).filter(
            KeyValueEntryModel.key == key
        ).delete(synchronize_session=False)
        self.session.commit()


__all__ = ["KeyValueRepository"]
