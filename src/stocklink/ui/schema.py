"""Pydantic models describing the links file accepted by the CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, RootModel


class LinkFileBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LinkEntry(LinkFileBaseModel):
    # presence is checked by the reconciler
    source_code: str | None = Field(default=None, alias="sourceCode")
    priority: int | None = None

    def as_record(self) -> dict[str, object]:
        # keys the file left out stay out, an explicit null clears the stored value
        return self.model_dump(exclude_unset=True)


class LinksFile(RootModel[list[LinkEntry]]):
    def as_records(self) -> list[dict[str, object]]:
        return [entry.as_record() for entry in self.root]


def load_links_file(path: Path) -> list[dict[str, object]]:
    """Read a JSON array of link objects into reconciler records."""

    return LinksFile.model_validate_json(path.read_text(encoding="utf-8")).as_records()


def parse_source_option(value: str) -> dict[str, object]:
    """Parse ``CODE`` or ``CODE:PRIORITY`` from the command line."""

    code, separator, priority = value.partition(":")
    record: dict[str, object] = {"source_code": code}
    if separator:
        record["priority"] = priority
    return record
