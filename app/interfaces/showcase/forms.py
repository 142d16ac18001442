"""
Multipart form decoding for portfolio writes.

JSON sub-fields (``tech_category``, ``descriptions``, ``images_meta``)
are decoded once here into typed values, and uploaded files are checked
against the upload policy, before any use case runs.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from fastapi import Request, UploadFile
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.application.showcase.dtos import FilePayload
from app.domain.showcase.errors import ValidationError
from app.domain.showcase.image_plan import ImageSlot
from app.interfaces.showcase.schemas import ImageSlotSchema

logger = logging.getLogger(__name__)

_STRING_LIST = TypeAdapter(list[str])
_SLOT_LIST = TypeAdapter(list[ImageSlotSchema])


@dataclass(frozen=True)
class UploadPolicy:
    """Limits applied to the ``images`` files of one request."""

    max_files: int
    max_bytes: int
    allowed_types: frozenset[str]


def _decode(raw: Optional[str], adapter: TypeAdapter, field_name: str) -> Optional[list]:
    if raw is None or not raw.strip():
        return None
    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as exc:
        logger.warning("Malformed %s field: %d error(s)", field_name, exc.error_count())
        raise ValidationError(f"{field_name} must be a valid JSON array") from exc


def decode_string_list(raw: Optional[str], field_name: str) -> Optional[list[str]]:
    """Decode a JSON array of strings. Blank entries are dropped.

    Returns:
        None when the field was not sent.
    """
    values = _decode(raw, _STRING_LIST, field_name)
    if values is None:
        return None
    return [value.strip() for value in values if value and value.strip()]


def decode_image_plan(
    raw: Optional[str], file_count: int
) -> Optional[list[ImageSlot]]:
    """Decode ``images_meta`` into an image plan.

    Files sent without ``images_meta`` are all new, in upload order.

    Returns:
        None when neither a plan nor files were sent.
    """
    slots = _decode(raw, _SLOT_LIST, "images_meta")
    if slots is not None:
        return [slot.to_slot() for slot in slots]
    if file_count:
        return [ImageSlot(is_new=True, file_index=index) for index in range(file_count)]
    return None


async def read_files(
    uploads: Optional[Sequence[UploadFile]], policy: UploadPolicy
) -> list[FilePayload]:
    """Read uploaded files into memory, enforcing count, type and size limits.

    A lone empty part is what a browser sends for an untouched file
    input and counts as no files. An empty part next to real files is
    rejected, since dropping it would shift every later ``fileIndex``.

    Raises:
        ValidationError: On the first file that breaks the policy.
    """
    uploads = list(uploads or ())
    if all(not upload.filename for upload in uploads):
        return []
    for index, upload in enumerate(uploads):
        if not upload.filename:
            raise ValidationError(f"File {index} in images is empty")
    if len(uploads) > policy.max_files:
        raise ValidationError(f"At most {policy.max_files} files can be uploaded at once")

    payloads = []
    for upload in uploads:
        if upload.content_type not in policy.allowed_types:
            raise ValidationError(
                f"Unsupported file type for {upload.filename}: {upload.content_type}"
            )
        content = await upload.read(policy.max_bytes + 1)
        if len(content) > policy.max_bytes:
            raise ValidationError(
                f"File {upload.filename} exceeds {policy.max_bytes // (1024 * 1024)} MB"
            )
        payloads.append(
            FilePayload(
                file_name=upload.filename,
                content=content,
                content_type=upload.content_type,
            )
        )
    return payloads


async def submitted_text(request: Request, name: str) -> Optional[str]:
    """Return a text field exactly as sent, or None when it was not sent.

    FastAPI maps an empty form value to the parameter default; this keeps
    the empty string so it can clear a stored value.
    """
    form = await request.form()
    value = form.get(name)
    return value if isinstance(value, str) else None
