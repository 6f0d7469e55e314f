from typing import Any

from pydantic import ConfigDict, computed_field, field_validator

from ..core.model import DisplayModel
from .address import MacAddress


class InterfaceRecord(DisplayModel):
    """A host interface and its hardware address."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    address: MacAddress

    @field_validator("address", mode="before")
    @classmethod
    def _coerce_address(cls, v: Any) -> Any:
        if isinstance(v, bytes | bytearray) and not isinstance(v, MacAddress):
            return MacAddress(v)
        return v

    @computed_field
    @property
    def group(self) -> bool:
        return self.address.is_group

    @computed_field
    @property
    def local(self) -> bool:
        return self.address.is_local
