"""
Domain service: Portfolio image plan reconciliation.

Pure business logic. No framework imports. No IO. No side effects.

An image plan is the client's ordered description of the desired final
image sequence. Each slot either keeps an image the portfolio already
owns (matched by id, else by URL) or introduces a new file. Comparing the
plan with the stored images yields the minimal work to apply it:

    - uploads:      new slots, inserted at their plan position
    - repositions:  kept images whose position or header flag changed
    - removals:     stored images no kept slot refers to

Position 0 is always the header image.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from app.domain.showcase.entities import PortfolioImage
from app.domain.showcase.errors import InvalidImagePlanError

HEADER_POSITION = 0


@dataclass(frozen=True)
class ImageSlot:
    """One entry of an image plan.

    Attributes:
        is_new: True when the slot carries a freshly uploaded file.
        url: URL of the stored image a kept slot refers to.
        image_id: Id of the stored image a kept slot refers to.
        file_index: Index into the request's files for new slots.
        alt_text: Optional alt text for new slots.
    """

    is_new: bool
    url: Optional[str] = None
    image_id: Optional[int] = None
    file_index: Optional[int] = None
    alt_text: Optional[str] = None


@dataclass(frozen=True)
class PlannedUpload:
    """A file to upload and insert at ``position``."""

    position: int
    file_index: int
    alt_text: Optional[str] = None

    @property
    def is_header(self) -> bool:
        return self.position == HEADER_POSITION


@dataclass(frozen=True)
class ImageReposition:
    """An in-place order change for a kept image. The remote file is untouched."""

    image_id: int
    display_order: int
    is_header: bool


@dataclass
class ImageChangeSet:
    """Everything needed to move a portfolio from its stored images to a plan."""

    uploads: list[PlannedUpload] = field(default_factory=list)
    repositions: list[ImageReposition] = field(default_factory=list)
    removals: list[PortfolioImage] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.uploads or self.repositions or self.removals)

    @property
    def removed_ids(self) -> list[int]:
        return [image.id for image in self.removals]


def plan_new_images(plan: Sequence[ImageSlot]) -> list[PlannedUpload]:
    """Return the uploads for a portfolio that has no images yet.

    Args:
        plan: The requested image sequence.

    Returns:
        One upload per slot, in plan order.

    Raises:
        InvalidImagePlanError: If a slot is not new or has no file index.
    """
    uploads = []
    for position, slot in enumerate(plan):
        if not slot.is_new:
            raise InvalidImagePlanError(
                f"Image slot {position} must be a new upload when creating a portfolio"
            )
        uploads.append(_upload_for(position, slot))
    return uploads


def reconcile_images(
    current: Sequence[PortfolioImage], plan: Sequence[ImageSlot]
) -> ImageChangeSet:
    """Diff the stored images against the desired plan.

    Kept slots are matched by stable identity (image id when given,
    otherwise URL), so reordering never forces a re-upload. A kept slot
    that matches nothing is treated as a replacement when it carries a
    file, and rejected otherwise.

    Args:
        current: Stored images of the portfolio.
        plan: The desired final image sequence.

    Returns:
        The uploads, repositions and removals that apply the plan.

    Raises:
        InvalidImagePlanError: If a slot references an unknown image
            without a file, or two slots reference the same image.
    """
    by_id = {image.id: image for image in current}
    by_url = {image.image_url: image for image in current}
    kept: set[int] = set()
    changes = ImageChangeSet()

    for position, slot in enumerate(plan):
        if slot.is_new:
            changes.uploads.append(_upload_for(position, slot))
            continue

        match = _find_stored(slot, by_id, by_url)
        if match is None:
            if slot.file_index is None:
                raise InvalidImagePlanError(
                    f"Image slot {position} refers to an image this portfolio does not have"
                )
            changes.uploads.append(_upload_for(position, slot))
            continue

        if match.id in kept:
            raise InvalidImagePlanError(
                f"Image slot {position} refers to an image already used by another slot"
            )
        kept.add(match.id)

        is_header = position == HEADER_POSITION
        if match.display_order != position or match.is_header != is_header:
            changes.repositions.append(
                ImageReposition(
                    image_id=match.id,
                    display_order=position,
                    is_header=is_header,
                )
            )

    changes.removals = [image for image in current if image.id not in kept]
    return changes


def _find_stored(
    slot: ImageSlot,
    by_id: dict[int, PortfolioImage],
    by_url: dict[str, PortfolioImage],
) -> Optional[PortfolioImage]:
    if slot.image_id is not None:
        return by_id.get(slot.image_id)
    if slot.url:
        return by_url.get(slot.url)
    return None


def _upload_for(position: int, slot: ImageSlot) -> PlannedUpload:
    if slot.file_index is None or slot.file_index < 0:
        raise InvalidImagePlanError(f"Image slot {position} has no file attached")
    return PlannedUpload(
        position=position,
        file_index=slot.file_index,
        alt_text=slot.alt_text,
    )
