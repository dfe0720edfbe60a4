"""Shared dataclasses and type helpers."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SeedSummary:
    """Outcome of a successful seed run."""

    account_email: str
    catalog_item_count: int
    contact_name: str

    def as_dict(self) -> dict:
        return {
            "account_email": self.account_email,
            "catalog_item_count": self.catalog_item_count,
            "contact_name": self.contact_name,
        }

    def __str__(self) -> str:
        return (
            f"account={self.account_email} catalog_items={self.catalog_item_count} "
            f"contact={self.contact_name}"
        )


__all__ = ["SeedSummary"]
