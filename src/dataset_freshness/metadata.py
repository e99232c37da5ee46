from __future__ import annotations
import math
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, ValidationError
import requests

from .errors import RetrievalError, SchemaError

RETRIEVAL_FAILED = "metadata retrieval failed"


class DatasetMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    rows_updated_at: float = Field(alias="rowsUpdatedAt")

    @property
    def last_updated(self) -> datetime:
        return datetime.fromtimestamp(self.rows_updated_at, tz=timezone.utc)


def dataset_url(site: str, dataset_id: str) -> str:
    return f"https://{site}/dataset/{dataset_id}"


def metadata_url(site: str, dataset_id: str) -> str:
    return f"https://{site}/api/views/{dataset_id}"


def _missing(field: str) -> SchemaError:
    return SchemaError(f'metadata missing or incomplete (no "{field}" value)')


def parse_metadata(meta) -> DatasetMetadata:
    """Validate a decoded ``/api/views/{id}`` payload."""
    if not isinstance(meta, dict) or not meta:
        raise RetrievalError(RETRIEVAL_FAILED)
    name = meta.get("name")
    if name is None:
        raise _missing("name")
    if not isinstance(name, str):
        raise SchemaError(f'metadata "name" is not a string: {name!r}')
    ts = meta.get("rowsUpdatedAt")
    if ts is None:
        raise _missing("rowsUpdatedAt")
    bad_ts = SchemaError(f'metadata "rowsUpdatedAt" is not a timestamp: {ts!r}')
    if isinstance(ts, bool) or not isinstance(ts, (int, float)):
        raise bad_ts
    try:
        finite = math.isfinite(ts)
        if finite:
            parsed = DatasetMetadata(name=name, rowsUpdatedAt=ts)
            # must also be representable as a datetime on this platform
            parsed.last_updated.astimezone()
    except (OverflowError, OSError, ValueError, ValidationError) as e:
        raise bad_ts from e
    if not finite:
        raise bad_ts
    return parsed


def fetch_metadata(site: str, dataset_id: str, timeout: float = 30.0) -> DatasetMetadata:
    url = metadata_url(site, dataset_id)
    try:
        r = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
        r.raise_for_status()
        meta = r.json()
    except (requests.RequestException, ValueError) as e:
        raise RetrievalError(f"{RETRIEVAL_FAILED} ({e})") from e
    return parse_metadata(meta)
