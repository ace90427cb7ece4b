"""Serializable mirror of :class:`~hexcoord.coords.HexCoord`.

``HexCoord`` is a frozen value type. Hosts that persist plain records (JSON
payloads, settings files, save games) store a ``HexCoordinateModel`` instead
and convert explicitly at the boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from .coords import HexCoord

logger = logging.getLogger(__name__)


class HexCoordinateModel(BaseModel):
    """Mutable, serializable axial coordinate."""

    model_config = ConfigDict(extra="forbid")

    q: int = 0
    r: int = 0

    @model_validator(mode="before")
    @classmethod
    def _coerce_payload(cls, value: object) -> Mapping[str, object] | object:
        if isinstance(value, Mapping):
            return value
        if isinstance(value, HexCoord):
            return {"q": value.q, "r": value.r}
        if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
            sequence = list(value)
            if len(sequence) == 2:
                logger.debug("coercing sequence payload %r to a hex coordinate", sequence)
                return {"q": sequence[0], "r": sequence[1]}
        return value

    @classmethod
    def from_hex(cls, hex_coord: HexCoord) -> HexCoordinateModel:
        """Duplicate the ``q`` and ``r`` values of ``hex_coord``."""

        return cls(q=hex_coord.q, r=hex_coord.r)

    @property
    def hex_coord(self) -> HexCoord:
        return self.to_hex()

    def to_hex(self) -> HexCoord:
        return HexCoord(self.q, self.r)

    def become(self, hex_coord: HexCoord) -> None:
        """Overwrite this record's ``q`` and ``r`` with those of ``hex_coord``."""

        self.q = hex_coord.q
        self.r = hex_coord.r

    def matches(self, hex_coord: HexCoord) -> bool:
        return self.q == hex_coord.q and self.r == hex_coord.r


__all__ = ["HexCoordinateModel"]
