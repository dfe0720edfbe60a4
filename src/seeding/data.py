"""Baseline dataset written by the seed.

The raw literals live in DEFAULT_SEED_DATA; `load_dataset` validates them
before anything touches the store.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from core.models import AccountRole


class AccountSeed(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    role: AccountRole = AccountRole.ADMIN


class CatalogItemSeed(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    cost: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    stock_current: int = Field(ge=0)
    stock_minimum: int = Field(ge=0)

    def fields(self) -> Dict[str, Any]:
        """Column values other than the key."""
        return self.model_dump(exclude={"id"})


class ContactSeed(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    notes: Optional[str] = None

    def fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"id"})


class SeedDataset(BaseModel):
    """The complete set of records one seed run writes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account: AccountSeed
    catalog_items: List[CatalogItemSeed] = Field(min_length=1)
    contact: ContactSeed


DEFAULT_SEED_DATA: Dict[str, Any] = {
    "account": {
        "email": "admin@aurix.com",
        "name": "Administrador",
        "password": "123456",
    },
    "catalog_items": [
        {
            "id": "produto-1",
            "name": "Produto Exemplo 1",
            "price": "100.00",
            "cost": "50.00",
            "stock_current": 20,
            "stock_minimum": 5,
        },
        {
            "id": "produto-2",
            "name": "Produto Exemplo 2",
            "price": "200.00",
            "cost": "120.00",
            "stock_current": 15,
            "stock_minimum": 10,
        },
    ],
    "contact": {
        "id": "cliente-1",
        "name": "Cliente Exemplo",
        "phone": "(11) 99999-9999",
        "notes": "Cliente de exemplo para testes",
    },
}


def load_dataset(raw: Optional[Mapping[str, Any]] = None) -> SeedDataset:
    """
    Validate raw seed data.

    Raises:
        ValidationError: if any value is missing or out of range.
    """
    try:
        return SeedDataset.model_validate(raw if raw is not None else DEFAULT_SEED_DATA)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid seed data: {exc}") from exc
