"""
Entity: Structured Record

Identity fields recovered from one scanned DNI (front + optional back).
Pure model, no framework dependency.
"""

from dataclasses import dataclass, fields


# Attribute name -> serialized (camelCase) key
FIELD_KEYS = {
    "given_name": "givenName",
    "surname": "surname",
    "id_number": "idNumber",
    "birth_date": "birthDate",
    "address": "address",
    "birthplace": "birthplace",
    "tax_id": "taxId",
}

BACK_FIELDS = ("tax_id", "address", "birthplace")


@dataclass
class StructuredRecord:
    """Fields extracted from the document. None = extraction failed."""
    # Front
    given_name: str | None = None     # ex: "Juan Carlos"
    surname: str | None = None        # ex: "Perez"
    id_number: str | None = None      # digits only, ex: "12345678"
    birth_date: str | None = None     # dd/mm/yyyy

    # Back
    address: str | None = None        # ex: "Av Siempreviva 742"
    birthplace: str | None = None     # ex: "Buenos Aires"
    tax_id: str | None = None         # NN-NNNNNNNN-N

    def to_dict(self) -> dict[str, str]:
        """Serialize with camelCase keys, omitting absent fields."""
        return {
            FIELD_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def merge_from(self, other: "StructuredRecord", names: tuple[str, ...] = BACK_FIELDS) -> None:
        """Copy the given fields from another record when they are set there."""
        for name in names:
            value = getattr(other, name)
            if value is not None:
                setattr(self, name, value)

    def is_empty(self) -> bool:
        return not self.to_dict()
