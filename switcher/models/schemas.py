"""
Goal: Pydantic model for one row of `aerospace list-windows --all`.
Frozen on purpose: a fetched list is a snapshot, never patched in place.
"""
from pydantic import BaseModel, ConfigDict


class WindowRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    info: str

    @property
    def label(self) -> str:
        """Row text shown in the overlay."""
        return f"{self.name} | {self.info}"
