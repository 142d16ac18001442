"""
Remote asset helpers shared by the portfolio write use cases.

Uploads gate correctness: any failure propagates and aborts the
surrounding transaction. Deletes are cleanup: they run only after a
successful commit, and each failure is logged and swallowed so the
committed database state is never reported as a failure.
"""

import logging
from typing import Iterable, Optional, Sequence

from app.application.showcase.dtos import FilePayload
from app.domain.showcase.entities import NewImage, PortfolioImage
from app.domain.showcase.errors import InvalidImagePlanError
from app.domain.showcase.image_plan import ImageSlot, PlannedUpload
from app.domain.showcase.ports import AssetStorage, PortfolioWriter

logger = logging.getLogger(__name__)


def check_file_references(plan: Sequence[ImageSlot], files: Sequence[FilePayload]) -> None:
    """Ensure every file index in ``plan`` points at a supplied file.

    Raises:
        InvalidImagePlanError: On the first index out of range.
    """
    for position, slot in enumerate(plan):
        if slot.file_index is None:
            continue
        if not 0 <= slot.file_index < len(files):
            raise InvalidImagePlanError(
                f"Image slot {position} references file {slot.file_index}, "
                f"but only {len(files)} file(s) were uploaded"
            )


def alt_text_for(title: Optional[str], upload: PlannedUpload) -> str:
    """Return the alt text for an upload, defaulting to "<title> - Image <n>"."""
    if upload.alt_text:
        return upload.alt_text
    return f"{title or 'Portfolio'} - Image {upload.position + 1}"


async def upload_and_insert(
    storage: AssetStorage,
    writer: PortfolioWriter,
    portfolio_id: int,
    uploads: Sequence[PlannedUpload],
    files: Sequence[FilePayload],
    folder: str,
    title: Optional[str],
) -> list[int]:
    """Upload each planned file in order and insert its image row.

    Uploads are sequential so the display order of every row is
    deterministic. The caller owns the transaction; on failure, assets
    uploaded so far stay in remote storage.

    Returns:
        Ids of the inserted image rows.
    """
    inserted = []
    uploaded: list[str] = []
    try:
        for upload in uploads:
            payload = files[upload.file_index]
            asset = await storage.upload(payload.content, payload.file_name, folder)
            uploaded.append(asset.file_id)
            logger.debug(
                "Uploaded portfolio=%s position=%d file_id=%s",
                portfolio_id,
                upload.position,
                asset.file_id,
            )
            image_id = await writer.add_image(
                portfolio_id,
                NewImage(
                    image_url=asset.url,
                    file_id=asset.file_id,
                    display_order=upload.position,
                    is_header=upload.is_header,
                    alt_text=alt_text_for(title, upload),
                ),
            )
            inserted.append(image_id)
    except Exception:
        if uploaded:
            logger.warning(
                "Image write for portfolio %s failed; %d uploaded asset(s) left in "
                "remote storage: %s",
                portfolio_id,
                len(uploaded),
                ", ".join(uploaded),
            )
        raise
    return inserted


async def purge_assets(storage: AssetStorage, images: Iterable[PortfolioImage]) -> int:
    """Best-effort removal of remote files for images already deleted in the DB.

    Must only be called after the deleting transaction has committed.

    Returns:
        Number of remote files deleted.
    """
    purged = 0
    for image in images:
        if not image.file_id:
            logger.warning(
                "Image id=%s has no file handle; remote asset left in place: %s",
                image.id,
                image.image_url,
            )
            continue
        try:
            await storage.delete(image.file_id)
            purged += 1
        except Exception:
            logger.warning(
                "Failed to delete remote asset file_id=%s for image id=%s",
                image.file_id,
                image.id,
                exc_info=True,
            )
    return purged
