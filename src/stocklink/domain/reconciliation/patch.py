"""Typed link patches and their overlay onto link records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stocklink.domain.model import StockSourceLink

log = logging.getLogger(__name__)

SOURCE_CODE_FIELD: Final[str] = "source_code"
PRIORITY_FIELD: Final[str] = "priority"


@dataclass(frozen=True, slots=True, kw_only=True)
class LinkPatch:
    """Desired state for one link.

    ``fields_set`` names the optional attributes the record actually carried;
    only those are written, so an explicit ``None`` clears a stored value while
    an absent key leaves it alone.
    """

    source_code: str
    priority: int | None = None
    fields_set: frozenset[str] = field(default_factory=frozenset)


def parse_link_patch(data: object, *, index: int = 0) -> LinkPatch:
    """Build a patch from one submitted record or raise ``ValidationError``.

    The source code is taken verbatim; it is the natural key stored links are
    matched on.
    """

    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Link record #{index} must be a mapping, got {type(data).__name__}",
            index=index,
        )
    record: Mapping[str, object] = data
    source_code = record.get(SOURCE_CODE_FIELD)
    if not isinstance(source_code, str) or not source_code.strip():
        raise ValidationError(
            f"Link record #{index} is missing '{SOURCE_CODE_FIELD}'",
            index=index,
        )
    if PRIORITY_FIELD not in record:
        return LinkPatch(source_code=source_code)
    return LinkPatch(
        source_code=source_code,
        priority=_parse_priority(record[PRIORITY_FIELD], index=index),
        fields_set=frozenset({PRIORITY_FIELD}),
    )


def _parse_priority(value: object, *, index: int) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Link record #{index} has a boolean priority", index=index)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return int(stripped)
        except ValueError as exc:
            raise ValidationError(
                f"Link record #{index} has a non-numeric priority: {value!r}",
                index=index,
            ) from exc
    raise ValidationError(
        f"Link record #{index} has an invalid priority type: {type(value).__name__}",
        index=index,
    )


def parse_link_patches(links_data: Sequence[object]) -> list[LinkPatch]:
    """Validate a whole batch, collapsing repeated source codes.

    The first invalid record aborts the batch. When a source code repeats, the
    last record wins but keeps the position of the first one.
    """

    patches: dict[str, LinkPatch] = {}
    for index, data in enumerate(links_data):
        patch = parse_link_patch(data, index=index)
        if patch.source_code in patches:
            log.warning(
                "Duplicate source code %r at record #%s overrides an earlier record",
                patch.source_code,
                index,
            )
        patches[patch.source_code] = patch
    return list(patches.values())


def apply_link_patch(link: StockSourceLink, patch: LinkPatch, *, stock_id: int) -> StockSourceLink:
    """Overlay ``patch`` onto ``link`` and bind it to ``stock_id``."""

    link.stock_id = stock_id
    link.source_code = patch.source_code
    if PRIORITY_FIELD in patch.fields_set:
        link.priority = patch.priority
    return link
