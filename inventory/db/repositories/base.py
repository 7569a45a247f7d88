"""
Shared repository plumbing.

`Repository` implements list/get/create/update/delete for a single ORM model
on top of an injected `Session`. Subclasses declare the model, its read
schema, the identifier column, the mutable fields and the identifier policy,
and may hook referential pre-checks in via `_check_references`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.db.identifiers import IdentifierPolicy, resolve_identifier
from inventory.db.results import Result

logger = logging.getLogger(__name__)

ReadT = TypeVar("ReadT", bound=BaseModel)


class Repository(Generic[ReadT]):
    model: Type[Any]
    read_schema: Type[ReadT]
    id_field: str
    entity_name: str
    entity_plural: str
    mutable_fields: Tuple[str, ...] = ()
    identifier_policy: IdentifierPolicy = IdentifierPolicy.CALLER_SUPPLIED

    def __init__(self, db: Session):
        self.db = db

    @property
    def _id_column(self):
        return getattr(self.model, self.id_field)

    def _query(self):
        return self.db.query(self.model)

    def _find(self, identifier: int):
        return self._query().filter(self._id_column == identifier).first()

    def _to_schema(self, row) -> ReadT:
        return self.read_schema.model_validate(row)

    def _values(self, data: BaseModel) -> Dict[str, Any]:
        return data.model_dump(include=set(self.mutable_fields))

    def _check_references(self, data: BaseModel) -> Optional[Result]:
        """Return a rejected `Result` when ``data`` points at missing rows."""
        return None

    def _not_found(self, identifier: int) -> Result:
        logger.warning("%s with ID %s not found.", self.entity_name.capitalize(), identifier)
        return Result.missing(f"{self.entity_name.capitalize()} with ID {identifier} not found.")

    def _storage_error(self, operation: str, exc: SQLAlchemyError, identifier=None) -> Result:
        self.db.rollback()
        logger.exception(
            "storage_error: operation=%s entity=%s id=%s",
            operation,
            self.entity_name,
            identifier,
        )
        target = self.entity_name if identifier is None else f"{self.entity_name} {identifier}"
        return Result.storage_error(f"Failed to {operation} {target}", exc)

    def list(self) -> Result[List[ReadT]]:
        logger.info("Fetching all %s.", self.entity_plural)
        try:
            rows = self._query().order_by(self._id_column).all()
        except SQLAlchemyError as e:
            return self._storage_error("list", e)
        return Result.success([self._to_schema(row) for row in rows])

    def get(self, identifier: int) -> Result[ReadT]:
        logger.info("Fetching %s with ID %s.", self.entity_name, identifier)
        try:
            row = self._find(identifier)
        except SQLAlchemyError as e:
            return self._storage_error("get", e, identifier)
        if row is None:
            return self._not_found(identifier)
        return Result.success(self._to_schema(row))

    def create(self, data: BaseModel) -> Result[ReadT]:
        identifier = getattr(data, self.id_field, None)
        logger.info("Creating a new %s.", self.entity_name)
        try:
            rejected = self._check_references(data)
            if rejected is not None:
                return rejected
            identifier = resolve_identifier(self.identifier_policy, self.db, self._id_column, identifier)
            row = self.model(**{self.id_field: identifier}, **self._values(data))
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            return self._storage_error("create", e, identifier)
        logger.info("Created %s with ID %s.", self.entity_name, identifier)
        return Result.success(self._to_schema(row))

    def update(self, identifier: int, data: BaseModel) -> Result[bool]:
        logger.info("Updating %s with ID %s.", self.entity_name, identifier)
        try:
            row = self._find(identifier)
            if row is None:
                return self._not_found(identifier)
            rejected = self._check_references(data)
            if rejected is not None:
                return rejected
            for key, value in self._values(data).items():
                setattr(row, key, value)
            self.db.commit()
        except SQLAlchemyError as e:
            return self._storage_error("update", e, identifier)
        return Result.success(True)

    def delete(self, identifier: int) -> Result[bool]:
        logger.info("Deleting %s with ID %s.", self.entity_name, identifier)
        try:
            row = self._find(identifier)
            if row is None:
                return self._not_found(identifier)
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            return self._storage_error("delete", e, identifier)
        return Result.success(True)
