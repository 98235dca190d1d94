"""
Entity List Manager

One generic controller for every record collection in the application
(students, teachers, books, fees, ...). Each collection is described by an
EntityDefinition: the form schema users submit, the full record schema, the
id prefix, the default ordering and any derived or collection-wide rules.

Guarantees:
- ids are unique within a collection, never change after creation and are
  never reissued after a delete
- a failed create/update/apply leaves the collection untouched
- query() always reflects the current collection; callers receive a fresh
  tuple of frozen records and cannot mutate the collection through it
"""

import threading
import time
from dataclasses import dataclass, field
from typing import (
    Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Sequence,
    Tuple, Type, TypeVar,
)

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from campushub.core.exceptions import RecordNotFoundError, ValidationError
from campushub.core.logging_config import logger
from campushub.schemas.common import EntityType, RecordBase

R = TypeVar("R", bound=RecordBase)

Values = Dict[str, Any]
DeriveFn = Callable[[Values, Optional[Any]], Values]
ConstraintFn = Callable[["EntityListManager", Values, Optional[str]], None]


def errors_from_pydantic(exc: PydanticValidationError, model: Type[BaseModel]) -> Dict[str, List[str]]:
    """Flatten a pydantic error into {field_name: [messages]}

    Field names are reported by their Python name even when the input used
    the camelCase alias.
    """
    alias_to_name = {
        info.alias: name for name, info in model.model_fields.items() if info.alias
    }
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field_name = str(loc[0])
        field_name = alias_to_name.get(field_name, field_name)
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.setdefault(field_name, []).append(message)
    return errors


@dataclass
class EntityDefinition(Generic[R]):
    """Declarative description of one record collection"""
    entity_type: EntityType
    label: str
    id_prefix: str
    form_model: Type[BaseModel]
    record_model: Type[R]
    sort_key: Optional[Callable[[R], Any]] = None
    sort_reverse: bool = False
    # fields set at creation that an edit must not overwrite
    preserved_fields: Tuple[str, ...] = ()
    # computes non-form fields from submitted values (and the existing record on edit)
    derive: Optional[DeriveFn] = None
    # collection-wide rules, e.g. "one timetable entry per slot"
    constraints: Sequence[ConstraintFn] = field(default_factory=tuple)


class EntityListManager(Generic[R]):
    """Create/update/delete/query over an in-memory collection of records"""

    def __init__(self, definition: EntityDefinition[R], seed: Iterable[Mapping[str, Any]] = ()):
        self.definition = definition
        self._records: List[R] = []
        self._lock = threading.RLock()

        for values in seed:
            self._records.append(self._build_record(dict(values)))
        self._ensure_unique_ids()
        # ids ever issued, deleted ones included
        self._issued = set(self.ids())
        self._sort()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def entity_type(self) -> EntityType:
        return self.definition.entity_type

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(record.id == record_id for record in self._records)

    def ids(self) -> List[str]:
        return [record.id for record in self._records]

    def get(self, record_id: str) -> R:
        with self._lock:
            return self._records[self._position(record_id)]

    def find(self, record_id: str) -> Optional[R]:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    def query(
        self,
        predicate: Optional[Callable[[R], bool]] = None,
        sort_key: Optional[Callable[[R], Any]] = None,
        reverse: bool = False,
    ) -> Tuple[R, ...]:
        """Derived, read-only view; recomputed on every call"""
        with self._lock:
            records = [r for r in self._records if predicate is None or predicate(r)]
        if sort_key is not None:
            records.sort(key=sort_key, reverse=reverse)
        return tuple(records)

    def filter_by(self, **equals: Any) -> Tuple[R, ...]:
        """Equality filter on record fields, e.g. filter_by(class_name="10")"""
        fields = self.definition.record_model.model_fields
        unknown = [name for name in equals if name not in fields]
        if unknown:
            raise ValidationError({name: ["Unknown filter field"] for name in unknown})
        return self.query(
            lambda record: all(getattr(record, name) == value for name, value in equals.items())
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, fields: Mapping[str, Any], computed: Optional[Mapping[str, Any]] = None) -> R:
        with self._lock:
            values = self._validate_form(fields)
            values = self._apply_derived(values, existing=None, computed=computed)
            self._check_constraints(values, exclude_id=None)

            values["id"] = self._next_id()
            record = self._build_record(values)

            self._records.append(record)
            self._sort()

        logger.log_record_event(self.entity_type.value, "created", record.id)
        return record

    def update(self, record_id: str, fields: Mapping[str, Any],
               computed: Optional[Mapping[str, Any]] = None) -> R:
        with self._lock:
            position = self._position(record_id)
            existing = self._records[position]

            values = self._validate_form(fields)
            for name in self.definition.preserved_fields:
                values[name] = getattr(existing, name)
            values = self._apply_derived(values, existing=existing, computed=computed)
            self._check_constraints(values, exclude_id=record_id)

            values["id"] = existing.id
            record = self._build_record(values)

            self._records[position] = record
            self._sort()

        logger.log_record_event(self.entity_type.value, "updated", record.id)
        return record

    def apply(self, record_id: str, changes: Mapping[str, Any]) -> R:
        """Atomically merge computed changes into one record

        Used by derived operations (payments, promotions, approvals) that
        change a few fields without resubmitting the whole form.
        """
        with self._lock:
            position = self._position(record_id)
            existing = self._records[position]

            if "id" in changes and changes["id"] != existing.id:
                raise ValidationError.for_field("id", "Record identifiers cannot be changed.")

            values = existing.model_dump()
            values.update(changes)
            self._check_constraints(values, exclude_id=record_id)
            record = self._build_record(values)

            self._records[position] = record
            self._sort()

        logger.log_record_event(self.entity_type.value, "changed", record.id,
                                changed_fields=sorted(changes))
        return record

    def delete(self, record_id: str) -> R:
        with self._lock:
            position = self._position(record_id)
            record = self._records.pop(position)

        logger.log_record_event(self.entity_type.value, "deleted", record.id)
        return record

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _position(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(self.definition.label, record_id)

    def _validate_form(self, fields: Mapping[str, Any]) -> Values:
        if isinstance(fields, BaseModel):
            fields = fields.model_dump()
        form_model = self.definition.form_model
        try:
            form = form_model.model_validate(dict(fields))
        except PydanticValidationError as e:
            raise ValidationError(errors_from_pydantic(e, form_model))
        return form.model_dump()

    def _apply_derived(self, values: Values, existing: Optional[R],
                       computed: Optional[Mapping[str, Any]]) -> Values:
        if self.definition.derive is not None:
            values.update(self.definition.derive(dict(values), existing))
        if computed:
            values.update(computed)
        return values

    def _check_constraints(self, values: Values, exclude_id: Optional[str]) -> None:
        for constraint in self.definition.constraints:
            constraint(self, values, exclude_id)

    def _build_record(self, values: Values) -> R:
        record_model = self.definition.record_model
        try:
            return record_model.model_validate(values)
        except PydanticValidationError as e:
            raise ValidationError(errors_from_pydantic(e, record_model))

    def _next_id(self) -> str:
        """Time-derived id, bumped past every id issued so far"""
        counter = int(time.time() * 1000)
        candidate = f"{self.definition.id_prefix}{counter}"
        while candidate in self._issued:
            counter += 1
            candidate = f"{self.definition.id_prefix}{counter}"
        self._issued.add(candidate)
        return candidate

    def _ensure_unique_ids(self) -> None:
        seen = set()
        for record in self._records:
            if record.id in seen:
                raise ValueError(f"Duplicate {self.definition.label} id in seed data: {record.id}")
            seen.add(record.id)

    def _sort(self) -> None:
        if self.definition.sort_key is not None:
            self._records.sort(key=self.definition.sort_key, reverse=self.definition.sort_reverse)
