"""
Content negotiation for the contacts API.

Resolves, for one request, the API version (from a dedicated header), the
representation variant and the serialization format (from Accept or
Content-Type). Each version owns a table of operations; each operation owns
ordered media type rules. The first rule matching the client's preference
wins, so two handlers can share the same route and method and differ only by
header.

Version selection happens first because it picks the table; media type
selection then narrows the representation inside that table.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from app.domain.errors import (
    NotAcceptableError,
    UnsupportedMediaTypeError,
    UnsupportedVersionError,
)

logger = logging.getLogger(__name__)

JSON = "application/json"
XML = "application/xml"
VND_CONTACT = "application/vnd.company.contact+json"
VND_CONTACT_WITH_PHONES = "application/vnd.company.contactwithphonesforcreation+json"
JSON_PATCH = "application/json-patch+json"

FORMAT_JSON = "json"
FORMAT_XML = "xml"

_VERSION_RE = re.compile(r"^(\d+)(?:\.0)?$")


class Variant(str, Enum):
    SUMMARY = "summary"
    DETAIL = "detail"
    CREATION = "creation"
    CREATION_WITH_PHONES = "creation_with_phones"
    UPDATE = "update"
    PATCH = "patch"
    PHONE = "phone"


class Operation(str, Enum):
    LIST_CONTACTS = "list_contacts"
    GET_CONTACT = "get_contact"
    CREATE_CONTACT = "create_contact"
    UPDATE_CONTACT = "update_contact"
    PATCH_CONTACT = "patch_contact"
    DELETE_CONTACT = "delete_contact"
    LIST_PHONES = "list_phones"
    GET_PHONE = "get_phone"


@dataclass(frozen=True)
class MediaRange:
    """One entry of an Accept header."""

    type: str
    subtype: str
    q: float = 1.0
    order: int = 0

    @classmethod
    def parse(cls, value: str, order: int = 0) -> "MediaRange | None":
        parts = [part.strip() for part in value.split(";")]
        essence = parts[0].lower()
        if "/" not in essence:
            return None
        main, sub = (piece.strip() for piece in essence.split("/", 1))
        if not main or not sub:
            return None
        q = 1.0
        for param in parts[1:]:
            name, _, raw = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    q = float(raw.strip())
                except ValueError:
                    q = 0.0
        return cls(type=main, subtype=sub, q=max(0.0, min(q, 1.0)), order=order)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    def matches(self, media_type: str) -> bool:
        main, _, sub = media_type.partition("/")
        if self.type == "*":
            return True
        if self.type != main:
            return False
        return self.subtype == "*" or self.subtype == sub


def parse_accept(header: str | None) -> list[MediaRange]:
    """Parses Accept into ranges sorted by preference (q desc, then client order)."""
    if not header or not header.strip():
        return []
    ranges = []
    for order, item in enumerate(header.split(",")):
        if not item.strip():
            continue
        media_range = MediaRange.parse(item, order)
        if media_range is not None:
            ranges.append(media_range)
    return sorted(ranges, key=lambda r: (-r.q, r.order))


def format_versions(versions: list[int]) -> str:
    """[1, 2] -> '1.0, 2.0' (value of the api-supported-versions header)."""
    return ", ".join(f"{version}.0" for version in sorted(versions))


def media_type_essence(header: str | None) -> str | None:
    """'application/json; charset=utf-8' -> 'application/json'."""
    if not header:
        return None
    essence = header.split(";", 1)[0].strip().lower()
    return essence or None


@dataclass(frozen=True)
class MediaTypeRule:
    """A (predicate, handler) pair: a media type and what it selects."""

    media_type: str
    variant: Variant | None
    format: str = FORMAT_JSON
    # For writes: the representation returned after the input was accepted.
    result_variant: Variant | None = None


@dataclass(frozen=True)
class OperationSpec:
    operation: Operation
    consumes: tuple[MediaTypeRule, ...] = ()
    produces: tuple[MediaTypeRule, ...] = ()
    authenticated: bool = False
    cacheable: bool = False


@dataclass(frozen=True)
class Negotiated:
    """Outcome of negotiation for a single request."""

    version: int
    operation: Operation
    output_variant: Variant | None = None
    format: str = FORMAT_JSON
    media_type: str | None = None
    input_variant: Variant | None = None
    input_media_type: str | None = None
    authenticated: bool = False
    cacheable: bool = False


@dataclass(frozen=True)
class NegotiationTable:
    versions: dict[int, dict[Operation, OperationSpec]] = field(default_factory=dict)

    def lookup(self, version: int, operation: Operation) -> OperationSpec | None:
        return self.versions.get(version, {}).get(operation)


def _readable(variant: Variant, *extra: MediaTypeRule) -> tuple[MediaTypeRule, ...]:
    return (
        MediaTypeRule(JSON, variant, FORMAT_JSON),
        MediaTypeRule(XML, variant, FORMAT_XML),
        *extra,
    )


def build_default_table() -> NegotiationTable:
    """Version 1 serves the full resource; version 2 only the authenticated list."""
    v1 = {
        Operation.LIST_CONTACTS: OperationSpec(
            Operation.LIST_CONTACTS,
            produces=_readable(Variant.SUMMARY),
        ),
        Operation.GET_CONTACT: OperationSpec(
            Operation.GET_CONTACT,
            produces=_readable(
                Variant.DETAIL,
                MediaTypeRule(VND_CONTACT, Variant.SUMMARY, FORMAT_JSON),
            ),
            cacheable=True,
        ),
        Operation.CREATE_CONTACT: OperationSpec(
            Operation.CREATE_CONTACT,
            consumes=(
                MediaTypeRule(JSON, Variant.CREATION, FORMAT_JSON, result_variant=Variant.SUMMARY),
                MediaTypeRule(
                    VND_CONTACT_WITH_PHONES,
                    Variant.CREATION_WITH_PHONES,
                    FORMAT_JSON,
                    result_variant=Variant.DETAIL,
                ),
            ),
            produces=(
                MediaTypeRule(JSON, None, FORMAT_JSON),
                MediaTypeRule(XML, None, FORMAT_XML),
            ),
        ),
        Operation.UPDATE_CONTACT: OperationSpec(
            Operation.UPDATE_CONTACT,
            consumes=(MediaTypeRule(JSON, Variant.UPDATE, FORMAT_JSON),),
        ),
        Operation.PATCH_CONTACT: OperationSpec(
            Operation.PATCH_CONTACT,
            consumes=(MediaTypeRule(JSON_PATCH, Variant.PATCH, FORMAT_JSON),),
        ),
        Operation.DELETE_CONTACT: OperationSpec(Operation.DELETE_CONTACT),
        Operation.LIST_PHONES: OperationSpec(
            Operation.LIST_PHONES,
            produces=_readable(Variant.PHONE),
        ),
        Operation.GET_PHONE: OperationSpec(
            Operation.GET_PHONE,
            produces=_readable(Variant.PHONE),
        ),
    }
    v2 = {
        Operation.LIST_CONTACTS: OperationSpec(
            Operation.LIST_CONTACTS,
            produces=_readable(Variant.SUMMARY),
            authenticated=True,
        ),
    }
    return NegotiationTable(versions={1: v1, 2: v2})


DEFAULT_TABLE = build_default_table()


class ContentNegotiator:
    def __init__(
        self,
        supported_versions: list[int],
        version_header: str = "X-API-Version",
        table: NegotiationTable = DEFAULT_TABLE,
    ) -> None:
        self._supported_versions = sorted(supported_versions)
        self._version_header = version_header.lower()
        self._table = table

    @property
    def supported_versions(self) -> list[int]:
        return list(self._supported_versions)

    def supported_versions_header(self) -> str:
        return format_versions(self._supported_versions)

    def resolve_version(self, raw: str | None) -> int:
        if raw is None or not raw.strip():
            return self._supported_versions[0]
        match = _VERSION_RE.match(raw.strip())
        if not match or int(match.group(1)) not in self._supported_versions:
            raise UnsupportedVersionError(raw, self._supported_versions)
        return int(match.group(1))

    def negotiate(self, operation: Operation, headers: Mapping[str, str]) -> Negotiated:
        lowered = {key.lower(): value for key, value in headers.items()}
        raw_version = lowered.get(self._version_header)
        version = self.resolve_version(raw_version)

        spec = self._table.lookup(version, operation)
        if spec is None:
            raise UnsupportedVersionError(raw_version or str(version), self._supported_versions)

        input_rule = None
        if spec.consumes:
            input_rule = self._match_content_type(spec, lowered.get("content-type"))

        output_rule = None
        if spec.produces:
            output_rule = self._match_accept(spec, lowered.get("accept"))

        output_variant = None
        if input_rule is not None and input_rule.result_variant is not None:
            output_variant = input_rule.result_variant
        elif output_rule is not None:
            output_variant = output_rule.variant

        return Negotiated(
            version=version,
            operation=operation,
            output_variant=output_variant,
            format=output_rule.format if output_rule else FORMAT_JSON,
            media_type=output_rule.media_type if output_rule else None,
            input_variant=input_rule.variant if input_rule else None,
            input_media_type=input_rule.media_type if input_rule else None,
            authenticated=spec.authenticated,
            cacheable=spec.cacheable,
        )

    def _match_content_type(self, spec: OperationSpec, header: str | None) -> MediaTypeRule:
        essence = media_type_essence(header)
        for rule in spec.consumes:
            if rule.media_type == essence:
                return rule
        logger.info(
            "Unsupported Content-Type",
            extra={"operation": spec.operation.value, "content_type": header},
        )
        raise UnsupportedMediaTypeError(header, [rule.media_type for rule in spec.consumes])

    def _match_accept(self, spec: OperationSpec, header: str | None) -> MediaTypeRule:
        ranges = parse_accept(header)
        if not ranges:
            return spec.produces[0]

        excluded = {r.essence for r in ranges if r.q == 0}
        for media_range in ranges:
            if media_range.q == 0:
                continue
            for rule in spec.produces:
                if rule.media_type in excluded:
                    continue
                if media_range.matches(rule.media_type):
                    return rule

        logger.info(
            "No acceptable representation",
            extra={"operation": spec.operation.value, "accept": header},
        )
        raise NotAcceptableError(header or "", [rule.media_type for rule in spec.produces])
