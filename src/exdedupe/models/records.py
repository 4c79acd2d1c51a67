"""Name record data model.

A ``NameRecord`` is the only input type of the engine: an opaque identifier,
a display name, and a payload the engine carries but never reads.
"""

from dataclasses import dataclass, field
from typing import Any

from exdedupe.errors import RecordFormatError

# Keys accepted for the identifier and display name, in priority order.
# "exerciseName" is the field name used by the workout log store.
ID_FIELDS: tuple[str, ...] = ("rid", "id")
NAME_FIELDS: tuple[str, ...] = ("name", "exerciseName")


@dataclass(frozen=True)
class NameRecord:
    """A named record owned by the persistence layer.

    Attributes
    ----------
    rid : str
        Opaque record identifier.
    name : str
        Display name as entered by the user.
    payload : dict[str, Any]
        Caller-owned data (weight, timestamp, ...). Never interpreted.
    """

    rid: str
    name: str
    payload: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {"rid": self.rid, "name": self.name, "payload": dict(self.payload)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NameRecord":
        """Create a record from a dictionary.

        Accepts both the shape written by :meth:`to_dict` and flat store
        documents such as ``{"id": ..., "exerciseName": ..., "weight": ...}``,
        in which case every other key becomes payload.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary (e.g. from JSON).

        Returns
        -------
        NameRecord
            Reconstructed record.

        Raises
        ------
        RecordFormatError
            If the identifier or the name is missing.
        """
        if not isinstance(data, dict):
            raise RecordFormatError(f"Record must be an object, got {type(data).__name__}")

        rid_key = next((k for k in ID_FIELDS if data.get(k) is not None), None)
        name_key = next((k for k in NAME_FIELDS if isinstance(data.get(k), str)), None)

        if rid_key is None:
            raise RecordFormatError("Record has no identifier ('rid' or 'id')")
        if name_key is None:
            raise RecordFormatError(f"Record {data[rid_key]!r} has no name")

        if "payload" in data and isinstance(data["payload"], dict):
            payload = dict(data["payload"])
        else:
            payload = {k: v for k, v in data.items() if k not in (rid_key, name_key)}

        return cls(rid=str(data[rid_key]), name=data[name_key], payload=payload)
