from __future__ import annotations

import pytest
from pydantic import ValidationError

from hexcoord import HexCoord, HexCoordinateModel


def test_empty_record_is_origin() -> None:
    record = HexCoordinateModel()
    assert record.q == 0 and record.r == 0
    assert record.to_hex() == HexCoord(0, 0)


def test_record_from_hex_copies_fields() -> None:
    h = HexCoord(4, -7)
    record = HexCoordinateModel.from_hex(h)
    assert (record.q, record.r) == (4, -7)
    assert record.matches(h)
    assert record.hex_coord == h


def test_become_overwrites_in_place() -> None:
    record = HexCoordinateModel(q=1, r=1)
    record.become(HexCoord(-3, 2))
    assert record.matches(HexCoord(-3, 2))
    assert not record.matches(HexCoord(1, 1))


def test_record_round_trip_through_json() -> None:
    record = HexCoordinateModel.from_hex(HexCoord(12, -5))
    payload = record.model_dump_json()
    restored = HexCoordinateModel.model_validate_json(payload)
    assert restored == record
    assert restored.to_hex() == HexCoord(12, -5)
    assert record.model_dump() == {"q": 12, "r": -5}


@pytest.mark.parametrize(
    "payload",
    [
        {"q": 3, "r": -1},
        (3, -1),
        [3, -1],
        HexCoord(3, -1),
    ],
)
def test_record_coerces_payloads(payload: object) -> None:
    record = HexCoordinateModel.model_validate(payload)
    assert record.to_hex() == HexCoord(3, -1)


def test_record_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        HexCoordinateModel.model_validate({"q": 1, "r": 2, "z": -3})


def test_record_rejects_bad_sequences() -> None:
    with pytest.raises(ValidationError):
        HexCoordinateModel.model_validate((1, 2, 3))
    with pytest.raises(ValidationError):
        HexCoordinateModel.model_validate("12")
