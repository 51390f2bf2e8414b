from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """Location of an object written to the blob store."""

    bucket: str
    key: str
    url: str
