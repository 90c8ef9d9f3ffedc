"""
Patch engine for the editable contact representation.

Implements the add/remove/replace/move/copy/test operations of JSON Patch
(RFC 6902) over a fixed schema: the members of ContactForUpdate. Pointers are
resolved against that known field set instead of arbitrary documents, so any
pointer outside it (nested paths, unknown members, the whole document) does
not resolve.

Operations run in order on a working copy. The first one that cannot be
applied rejects the whole document; the caller never sees a partial result.
The patched document is then revalidated with the same rules as any other
update, including the first name != last name rule.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from app.api.schemas.contacts import ContactForUpdate
from app.application.validation import collect_errors
from app.domain.errors import PatchRejectedError

logger = logging.getLogger(__name__)

_MISSING = object()


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


_NEEDS_VALUE = {PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST}
_NEEDS_FROM = {PatchOp.MOVE, PatchOp.COPY}


class PatchField(str, Enum):
    """Addressable members of the editable representation."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"

    @classmethod
    def from_pointer(cls, pointer: str) -> "PatchField":
        if not pointer.startswith("/"):
            raise PatchRejectedError(
                PatchRejectedError.PATH_NOT_FOUND,
                f"The path '{pointer}' does not point to an editable field",
            )
        tokens = [t.replace("~1", "/").replace("~0", "~") for t in pointer[1:].split("/")]
        if len(tokens) == 1:
            wanted = tokens[0].lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        raise PatchRejectedError(
            PatchRejectedError.PATH_NOT_FOUND,
            f"The path '{pointer}' does not point to an editable field",
        )


@dataclass(frozen=True)
class PatchOperation:
    op: PatchOp
    path: PatchField
    value: Any = None
    from_: PatchField | None = None

    @classmethod
    def from_wire(cls, raw: Any, index: int) -> "PatchOperation":
        if not isinstance(raw, dict):
            raise PatchRejectedError(
                PatchRejectedError.MALFORMED_DOCUMENT,
                f"Operation #{index} must be a JSON object",
            )
        try:
            op = PatchOp(str(raw.get("op", "")).lower())
        except ValueError:
            raise PatchRejectedError(
                PatchRejectedError.INVALID_OPERATION,
                f"Operation #{index} has an unknown 'op': {raw.get('op')!r}",
            ) from None

        path = raw.get("path")
        if not isinstance(path, str):
            raise PatchRejectedError(
                PatchRejectedError.INVALID_OPERATION,
                f"Operation #{index} ('{op.value}') requires a string 'path'",
            )

        value = raw.get("value", _MISSING)
        if op in _NEEDS_VALUE and value is _MISSING:
            raise PatchRejectedError(
                PatchRejectedError.INVALID_OPERATION,
                f"Operation #{index} ('{op.value}') requires a 'value'",
            )

        from_field = None
        if op in _NEEDS_FROM:
            source = raw.get("from")
            if not isinstance(source, str):
                raise PatchRejectedError(
                    PatchRejectedError.INVALID_OPERATION,
                    f"Operation #{index} ('{op.value}') requires a string 'from'",
                )
            from_field = PatchField.from_pointer(source)

        return cls(
            op=op,
            path=PatchField.from_pointer(path),
            value=None if value is _MISSING else value,
            from_=from_field,
        )


def parse_patch_document(document: Any) -> list[PatchOperation]:
    """Builds operations from the wire payload (a JSON array of objects)."""
    if not isinstance(document, list):
        raise PatchRejectedError(
            PatchRejectedError.MALFORMED_DOCUMENT,
            "A patch document must be a JSON array of operations",
        )
    return [PatchOperation.from_wire(raw, index) for index, raw in enumerate(document)]


@dataclass
class PatchResult:
    representation: ContactForUpdate | None
    errors: list[tuple[str, str]]

    @property
    def is_valid(self) -> bool:
        return self.representation is not None and not self.errors


class PatchEngine:
    def apply_operations(
        self, document: dict[str, Any], operations: Sequence[PatchOperation]
    ) -> dict[str, Any]:
        """Structural application only; raises PatchRejectedError on the first failure."""
        working = dict(document)
        for operation in operations:
            self._apply_one(working, operation)
        return working

    def apply(
        self, base: ContactForUpdate, operations: Sequence[PatchOperation]
    ) -> PatchResult:
        document = base.model_dump(by_alias=True)
        patched = self.apply_operations(document, operations)
        representation, errors = collect_errors(ContactForUpdate, patched)
        return PatchResult(representation=representation, errors=errors)

    def _apply_one(self, working: dict[str, Any], operation: PatchOperation) -> None:
        target = operation.path.value

        if operation.op in (PatchOp.ADD, PatchOp.REPLACE):
            working[target] = operation.value
        elif operation.op == PatchOp.REMOVE:
            working[target] = None
        elif operation.op == PatchOp.COPY:
            working[target] = working[operation.from_.value]
        elif operation.op == PatchOp.MOVE:
            if operation.from_ != operation.path:
                value = working[operation.from_.value]
                working[operation.from_.value] = None
                working[target] = value
        elif operation.op == PatchOp.TEST:
            if working[target] != operation.value:
                raise PatchRejectedError(
                    PatchRejectedError.TEST_FAILED,
                    f"Test failed: '{operation.path.value}' is {working[target]!r}, "
                    f"expected {operation.value!r}",
                )
