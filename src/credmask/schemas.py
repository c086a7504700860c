from __future__ import annotations

"""Report schemas.

CONTRACT
- Inputs: Pydantic models
- Outputs:
  - Validated JSON-serializable scrub reports
- Invariants:
  - All schemas have schema_version int field
  - Reports never contain the original (unredacted) text
- Failure:
  - Raises ValidationError on schema mismatch
"""

from pydantic import BaseModel, Field, computed_field


class LineReport(BaseModel):
    schema_version: int = 1
    output: str
    redacted: dict[str, int] = Field(default_factory=dict)


class ScrubReport(BaseModel):
    schema_version: int = 1
    source: str
    mode: str = "fields"
    fields: list[str] = Field(default_factory=list)
    lines: list[LineReport] = Field(default_factory=list)

    @computed_field
    @property
    def total_redacted(self) -> int:
        return sum(sum(line.redacted.values()) for line in self.lines)
