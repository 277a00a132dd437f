"""Replace-strategy reconciliation of stock to source links.

Flow for one stock:
1) validate the submitted records into typed patches
2) load the persisted links and index them by source code
3) overlay patches onto matched (or new) links to form the save batch
4) delete whatever persisted link was not submitted
"""

from __future__ import annotations

from .errors import ValidationError
from .patch import (
    PRIORITY_FIELD,
    SOURCE_CODE_FIELD,
    LinkPatch,
    apply_link_patch,
    parse_link_patch,
    parse_link_patches,
)
from .plan import LinkReconciliationPlan
from .reconciler import LinkReconciler, plan_link_changes

__all__ = [
    "PRIORITY_FIELD",
    "SOURCE_CODE_FIELD",
    "LinkPatch",
    "LinkReconciler",
    "LinkReconciliationPlan",
    "ValidationError",
    "apply_link_patch",
    "parse_link_patch",
    "parse_link_patches",
    "plan_link_changes",
]
