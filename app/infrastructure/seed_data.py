"""Datos de demostración para un store vacío."""

from app.domain.entities.contact import Contact, Phone


def demo_contacts() -> list[Contact]:
    """Retorna contactos nuevos (sin ids) en cada llamada."""
    return [
        Contact(
            first_name="Jan",
            last_name="Kowalski",
            email="jkowalski@u.pl",
            phones=[
                Phone(number="111-111-1111", description="Domowy"),
                Phone(number="222-222-2222", description="Służbowy"),
            ],
        ),
        Contact(first_name="Adam", last_name="Nowak", email="anowak@u.pl"),
    ]
