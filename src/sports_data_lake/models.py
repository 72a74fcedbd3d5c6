"""Record types decoded from the sports data API."""

from typing import Any, Dict, Iterator, List

from pydantic import BaseModel, Field

from .exceptions import UnexpectedStructureError

Record = Dict[str, Any]


class RecordBatch(BaseModel):
    """Ordered, in-memory list of loosely typed API records."""

    records: List[Record] = Field(default_factory=list)

    @classmethod
    def from_json(cls, payload: Any) -> "RecordBatch":
        """
        Build a batch from a decoded JSON payload.

        A top-level array yields one record per element and a top-level
        object yields a single record.

        Raises:
            UnexpectedStructureError: For any other top-level shape, or an
                array containing non-object elements.
        """
        if isinstance(payload, list):
            if not all(isinstance(item, dict) for item in payload):
                raise UnexpectedStructureError("unexpected JSON structure: array elements must be objects")
            return cls(records=payload)
        if isinstance(payload, dict):
            return cls(records=[payload])
        raise UnexpectedStructureError()

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
