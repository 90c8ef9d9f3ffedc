"""Entidades Contact y Phone - agregado de contactos de la agenda."""

from dataclasses import dataclass, field


@dataclass
class Phone:
    """
    Teléfono asociado a un contacto.

    Un teléfono no existe sin su contacto dueño (contact_id).
    """

    id: int | None = None
    contact_id: int | None = None
    number: str = ""
    description: str | None = None


@dataclass
class Contact:
    """
    Agregado raíz de la agenda.

    El id lo asigna el store al crear y no cambia después.
    Los teléfonos conservan el orden de inserción solo para mostrarse.
    """

    # Identificadores
    id: int | None = None

    # Datos personales
    first_name: str = ""
    last_name: str = ""
    email: str | None = None

    # Teléfonos
    phones: list[Phone] = field(default_factory=list)

    # === Propiedades ===

    @property
    def full_name(self) -> str:
        """Retorna el nombre completo del contacto."""
        return f"{self.first_name} {self.last_name}".strip()

    # === Métodos ===

    def update_info(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
    ) -> None:
        """Actualiza los datos personales (nunca el id ni los teléfonos)."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self.email = email

    def add_phone(self, number: str, description: str | None = None) -> Phone:
        """Agrega un teléfono al contacto."""
        phone = Phone(contact_id=self.id, number=number, description=description)
        self.phones.append(phone)
        return phone

    def find_phone(self, phone_id: int) -> Phone | None:
        """Busca un teléfono propio por su id."""
        for phone in self.phones:
            if phone.id == phone_id:
                return phone
        return None
