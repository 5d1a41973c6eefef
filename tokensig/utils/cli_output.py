"""Schema-stamped JSON output for CLI commands.

Every JSON document printed by the CLI carries ``schema_id``,
``schema_version``, ``producer`` and ``produced_at`` so downstream tooling can
detect format changes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from tokensig import __version__


@dataclass(frozen=True, slots=True)
class SchemaStamp:
    """Schema metadata applied to emitted records."""

    schema_id: str
    schema_version: int
    producer: str
    produced_at: str

    def apply(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of ``payload`` augmented with schema metadata."""

        stamped = {
            "schema_id": self.schema_id,
            "schema_version": self.schema_version,
            "producer": self.producer,
            "produced_at": self.produced_at,
        }
        stamped.update(payload)
        return stamped


def build_schema_stamp(
    *,
    schema_id: str,
    schema_version: int,
    producer: str | None = None,
    produced_at: str | None = None,
) -> SchemaStamp:
    """Construct a :class:`SchemaStamp` for reuse across writers."""

    return SchemaStamp(
        schema_id=schema_id,
        schema_version=schema_version,
        producer=producer or f"tokensig-{__version__}",
        produced_at=produced_at or datetime.now(UTC).isoformat(),
    )


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Example:
        >>> json_response("token", 1, key="ab12...", when=1000, uri="/api")
        {
          "schema_id": "token",
          "schema_version": 1,
          "producer": "tokensig-0.1.0",
          "produced_at": "2026-01-01T10:30:00+00:00",
          "key": "ab12...",
          ...
        }
    """
    stamp = build_schema_stamp(schema_id=schema_id, schema_version=schema_version)
    return json.dumps(stamp.apply(data), indent=2, default=str)
