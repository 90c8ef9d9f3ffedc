"""
Rendering of representations into JSON or XML bodies.

JSON keeps the camelCase aliases of the wire models. XML follows the same
field names: the root element is named after the representation, lists of
models become a container element holding one element per item, and null
fields carry nil="true".
"""

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Sequence

from pydantic import BaseModel

from app.application.negotiation import FORMAT_XML, JSON, XML


@dataclass(frozen=True)
class Rendered:
    body: bytes
    media_type: str


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append_value(parent: ET.Element, name: str, value: Any) -> None:
    element = ET.SubElement(parent, name)
    if value is None:
        element.set("nil", "true")
    elif isinstance(value, BaseModel):
        _fill_model(element, value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, BaseModel):
                _fill_model(ET.SubElement(element, type(item).xml_name), item)
            else:
                ET.SubElement(element, "Item").text = _to_text(item)
    else:
        element.text = _to_text(value)


def _fill_model(element: ET.Element, model: BaseModel) -> None:
    for name, field in type(model).model_fields.items():
        _append_value(element, field.alias or name, getattr(model, name))


def to_xml(representation: BaseModel | Sequence[BaseModel], model: type[BaseModel]) -> bytes:
    if isinstance(representation, BaseModel):
        root = ET.Element(model.xml_name)
        _fill_model(root, representation)
    else:
        root = ET.Element(f"ArrayOf{model.xml_name}")
        for item in representation:
            _fill_model(ET.SubElement(root, model.xml_name), item)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def to_json(representation: BaseModel | Sequence[BaseModel]) -> bytes:
    if isinstance(representation, BaseModel):
        payload = representation.model_dump(by_alias=True, mode="json")
    else:
        payload = [item.model_dump(by_alias=True, mode="json") for item in representation]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def render(
    representation: BaseModel | Sequence[BaseModel],
    model: type[BaseModel],
    fmt: str,
    media_type: str | None = None,
) -> Rendered:
    """Serializes representation; media_type defaults to the plain type of fmt."""
    if fmt == FORMAT_XML:
        return Rendered(body=to_xml(representation, model), media_type=media_type or XML)
    return Rendered(body=to_json(representation), media_type=media_type or JSON)
