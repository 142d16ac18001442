"""
Tests for multipart decoding of portfolio writes.

Files go through ``read_files`` exactly as the routes receive them, so
position in the request must stay aligned with ``fileIndex``.
"""

from io import BytesIO

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.domain.showcase.errors import ValidationError
from app.interfaces.showcase.forms import UploadPolicy, decode_image_plan, read_files

POLICY = UploadPolicy(
    max_files=3, max_bytes=1024, allowed_types=frozenset({"image/png", "image/jpeg"})
)


def part(filename: str, content: bytes = b"\x89PNG", content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestReadFiles:
    """Tests for read_files."""

    @pytest.mark.asyncio
    async def test_order_preserved(self) -> None:
        payloads = await read_files([part("a.png"), part("b.jpg", b"JPEG", "image/jpeg")], POLICY)
        assert [p.file_name for p in payloads] == ["a.png", "b.jpg"]
        assert payloads[1].content == b"JPEG"

    @pytest.mark.asyncio
    async def test_untouched_file_input_means_no_files(self) -> None:
        assert await read_files([part("", b"", "application/octet-stream")], POLICY) == []
        assert await read_files(None, POLICY) == []

    @pytest.mark.asyncio
    async def test_empty_part_between_files_rejected(self) -> None:
        """Dropping the empty part would point fileIndex 1 at the wrong file."""
        uploads = [part("a.png"), part("", b"", "application/octet-stream"), part("c.png")]
        with pytest.raises(ValidationError, match="File 1"):
            await read_files(uploads, POLICY)

    @pytest.mark.asyncio
    async def test_too_many_files(self) -> None:
        with pytest.raises(ValidationError):
            await read_files([part(f"{i}.png") for i in range(4)], POLICY)

    @pytest.mark.asyncio
    async def test_oversized_file(self) -> None:
        with pytest.raises(ValidationError):
            await read_files([part("big.png", b"x" * 1025)], POLICY)

    @pytest.mark.asyncio
    async def test_disallowed_type(self) -> None:
        with pytest.raises(ValidationError):
            await read_files([part("x.exe", b"MZ", "application/octet-stream")], POLICY)


class TestDecodeImagePlan:
    """Tests for decode_image_plan."""

    def test_files_without_plan_are_all_new(self) -> None:
        plan = decode_image_plan(None, 2)
        assert [(slot.is_new, slot.file_index) for slot in plan] == [(True, 0), (True, 1)]

    def test_nothing_sent(self) -> None:
        assert decode_image_plan("", 0) is None

    def test_invalid_json(self) -> None:
        with pytest.raises(ValidationError, match="images_meta"):
            decode_image_plan("[{", 0)
