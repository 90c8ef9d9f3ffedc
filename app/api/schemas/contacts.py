from typing import ClassVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator, constr
from pydantic.alias_generators import to_camel

# C0 control characters other than tab, LF and CR cannot appear in an XML document.
PRINTABLE_TEXT = r"^[^\x00-\x08\x0B\x0C\x0E-\x1F]*$"

PersonName = constr(strip_whitespace=True, min_length=1, max_length=50, pattern=PRINTABLE_TEXT)
PhoneNumber = constr(strip_whitespace=True, min_length=1, max_length=30, pattern=PRINTABLE_TEXT)
PhoneDescription = constr(strip_whitespace=True, max_length=100, pattern=PRINTABLE_TEXT)

EMAIL_MAX_LENGTH = 100


def check_email(value: str | None) -> str | None:
    """
    Valida la dirección sin reescribirla: se guarda tal como la envió el cliente.
    """
    if value is None:
        return None
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


class CamelModel(BaseModel):
    """Wire models use camelCase field names; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Element name used when the representation is rendered as XML.
    xml_name: ClassVar[str] = "Item"


# === Output representations ===


class PhoneDto(CamelModel):
    xml_name: ClassVar[str] = "Phone"

    id: int
    number: str
    description: str | None = None


class ContactSummary(CamelModel):
    xml_name: ClassVar[str] = "Contact"

    id: int
    full_name: str


class ContactDetails(CamelModel):
    xml_name: ClassVar[str] = "ContactDetails"

    id: int
    first_name: str
    last_name: str
    email: str | None = None
    phones: list[PhoneDto] = []


# === Input representations ===


class PhoneForCreation(CamelModel):
    number: PhoneNumber
    description: PhoneDescription | None = None


class ContactForCreation(CamelModel):
    first_name: PersonName
    last_name: PersonName
    email: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str | None) -> str | None:
        return check_email(value)


class ContactWithPhonesForCreation(ContactForCreation):
    phones: list[PhoneForCreation]


class ContactForUpdate(CamelModel):
    first_name: PersonName
    last_name: PersonName
    email: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str | None) -> str | None:
        return check_email(value)
