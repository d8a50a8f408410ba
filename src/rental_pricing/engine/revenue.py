"""Revenue path — payout percentage and the save-gating state machine.

Payout (share of gross the partner keeps):

  insurance            → 40   (tier ignored)
  tiers + p2p          → 75
  tiers + commercial   → 90
  tiers + self_manage  → 75
  tiers + no tier yet  → None

Editor states::

  unselected ─edit→ draft ─save→ saving ─ok→ saved
                      ↑            │fail       │edit
                      └────────────┴───────────┘
"""

from __future__ import annotations

import logging
from typing import Callable, Literal

from rental_pricing.config.revenue import RevenuePath, RevenueSelection, RevenueTier
from rental_pricing.models.results import SelectionStatus

logger = logging.getLogger(__name__)

INSURANCE_PAYOUT_PERCENT = 40
TIER_PAYOUT_PERCENT: dict[str, int] = {
    "p2p": 75,
    "commercial": 90,
    "self_manage": 75,
}

EditorState = Literal["unselected", "draft", "saving", "saved"]


class SelectionSaveError(Exception):
    """The persistence layer rejected or failed to store a selection."""


class DuplicateSubmissionError(Exception):
    """A save was requested while another save is still in flight."""


class IncompleteSelectionError(Exception):
    """A save was requested for a selection that cannot be saved."""


def payout_percent(path: RevenuePath | None, tier: RevenueTier | None) -> int | None:
    """Partner payout percent, or None when the selection is incomplete."""
    if path == "insurance":
        return INSURANCE_PAYOUT_PERCENT
    if path == "tiers" and tier is not None:
        return TIER_PAYOUT_PERCENT[tier]
    return None


def is_complete(path: RevenuePath | None, tier: RevenueTier | None) -> bool:
    """A path is chosen, and a tier too when the path is 'tiers'."""
    if path is None:
        return False
    return path == "insurance" or tier is not None


def has_unsaved_changes(
    draft_path: RevenuePath | None,
    draft_tier: RevenueTier | None,
    saved_path: RevenuePath | None,
    saved_tier: RevenueTier | None,
) -> bool:
    return draft_path != saved_path or draft_tier != saved_tier


def can_save(
    draft_path: RevenuePath | None,
    draft_tier: RevenueTier | None,
    saved_path: RevenuePath | None,
    saved_tier: RevenueTier | None,
) -> bool:
    return (
        has_unsaved_changes(draft_path, draft_tier, saved_path, saved_tier)
        and is_complete(draft_path, draft_tier)
    )


def selection_status(draft: RevenueSelection, saved: RevenueSelection) -> SelectionStatus:
    """Everything the save control needs, in one model."""
    changed = has_unsaved_changes(draft.path, draft.tier, saved.path, saved.tier)
    complete = is_complete(draft.path, draft.tier)
    return SelectionStatus(
        payout_percent=payout_percent(draft.path, draft.tier),
        has_unsaved_changes=changed,
        is_complete=complete,
        can_save=changed and complete,
    )


class RevenuePathEditor:
    """Draft/saved tracking for one partner's revenue path.

    ``save_fn`` is the persistence call.  Any exception it raises is wrapped
    in :class:`SelectionSaveError`; the editor goes back to ``draft`` and the
    saved selection is left untouched.  There is no automatic retry.
    """

    def __init__(
        self,
        saved: RevenueSelection | None = None,
        save_fn: Callable[[RevenueSelection], None] | None = None,
    ):
        self.saved = saved or RevenueSelection()
        self.draft = self.saved.model_copy()
        self._save_fn = save_fn
        self.in_flight = False
        self.error: str | None = None
        self.state: EditorState = "saved" if self.saved.path is not None else "unselected"

    # -- edits ---------------------------------------------------------------

    def select_path(self, path: RevenuePath) -> None:
        # Insurance has no sub-selection.
        tier = None if path == "insurance" else self.draft.tier
        self._edit(RevenueSelection(path=path, tier=tier))

    def select_tier(self, tier: RevenueTier) -> None:
        self._edit(RevenueSelection(path="tiers", tier=tier))

    def _edit(self, selection: RevenueSelection) -> None:
        self.draft = selection
        self.error = None
        if self.state != "saving":
            self.state = "draft"

    # -- status --------------------------------------------------------------

    @property
    def status(self) -> SelectionStatus:
        return selection_status(self.draft, self.saved)

    @property
    def payout_percent(self) -> int | None:
        return payout_percent(self.draft.path, self.draft.tier)

    # -- save ----------------------------------------------------------------

    def save(self) -> RevenueSelection:
        """Persist the draft.  Returns the new saved selection."""
        if self.in_flight:
            raise DuplicateSubmissionError("A save is already in progress")
        if not self.status.can_save:
            raise IncompleteSelectionError("Nothing to save or selection incomplete")

        previous_state = self.state
        self.in_flight = True
        self.state = "saving"
        submitted = self.draft.model_copy()
        try:
            if self._save_fn is not None:
                self._save_fn(submitted)
        except Exception as e:
            self.state = previous_state
            self.error = f"Failed to save revenue path: {e}"
            logger.error(self.error)
            raise SelectionSaveError(self.error) from e
        finally:
            self.in_flight = False

        self.saved = submitted
        # An edit made while the save was in flight is still unsaved.
        self.state = "saved" if self.draft == submitted else "draft"
        self.error = None
        logger.info(f"Saved revenue path: path={submitted.path}, tier={submitted.tier}")
        return submitted
