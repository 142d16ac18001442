"""
Test doubles and builders shared by the showcase tests.
"""

from typing import Iterable, Optional

from app.application.showcase.create_portfolio import CreatePortfolioUseCase
from app.application.showcase.dtos import CreatePortfolioCommand, FilePayload
from app.domain.showcase.entities import (
    Portfolio,
    PortfolioFields,
    PortfolioImage,
    UploadedAsset,
)
from app.domain.showcase.errors import AssetStorageError
from app.domain.showcase.image_plan import ImageSlot
from app.domain.showcase.ports import AssetStorage

ASSET_FOLDER = "/portfolio"


class FakeAssetStorage(AssetStorage):
    """In-memory AssetStorage.

    Args:
        fail_on_upload: 1-based number of the upload attempt that raises.
        fail_deletes: File ids whose delete raises.
    """

    def __init__(
        self, fail_on_upload: Optional[int] = None, fail_deletes: Iterable[str] = ()
    ) -> None:
        self.uploaded: list[UploadedAsset] = []
        self.deleted: list[str] = []
        self.upload_attempts = 0
        self.delete_attempts = 0
        self.fail_on_upload = fail_on_upload
        self.fail_deletes = set(fail_deletes)

    async def upload(self, content: bytes, file_name: str, folder: str) -> UploadedAsset:
        self.upload_attempts += 1
        if self.upload_attempts == self.fail_on_upload:
            raise AssetStorageError("upload", "simulated outage")
        number = self.upload_attempts
        asset = UploadedAsset(
            url=f"https://cdn.test{folder}/{number}-{file_name}",
            file_id=f"file-{number}",
        )
        self.uploaded.append(asset)
        return asset

    async def delete(self, file_id: str) -> None:
        self.delete_attempts += 1
        if file_id in self.fail_deletes:
            raise AssetStorageError("delete", "simulated outage")
        self.deleted.append(file_id)


def make_files(count: int) -> list[FilePayload]:
    """Build ``count`` small PNG payloads named img0.png, img1.png, ..."""
    return [
        FilePayload(
            file_name=f"img{i}.png",
            content=b"\x89PNG" + bytes([i]),
            content_type="image/png",
        )
        for i in range(count)
    ]


def new_slots(count: int) -> list[ImageSlot]:
    return [ImageSlot(is_new=True, file_index=i) for i in range(count)]


def keep(image: PortfolioImage) -> ImageSlot:
    """A kept slot referring to a stored image by id."""
    return ImageSlot(is_new=False, image_id=image.id, url=image.image_url)


def stored_image(
    image_id: int, display_order: int, file_id: Optional[str] = None
) -> PortfolioImage:
    """A stored image as the writer would list it."""
    return PortfolioImage(
        id=image_id,
        image_url=f"https://cdn.test/portfolio/{image_id}.png",
        display_order=display_order,
        is_header=display_order == 0,
        file_id=file_id or f"file-{image_id}",
    )


async def create_portfolio(
    use_case: CreatePortfolioUseCase,
    slug: str = "alpha",
    images: int = 0,
    categories: Iterable[str] = (),
    descriptions: Iterable[str] = (),
) -> Portfolio:
    """Create a portfolio with ``images`` new images in upload order."""
    return await use_case.execute(
        CreatePortfolioCommand(
            fields=PortfolioFields(
                title=slug.title(),
                slug=slug,
                project_type="Web App",
                publisher_name="Acme",
            ),
            category_slugs=list(categories),
            descriptions=list(descriptions),
            image_plan=new_slots(images),
            files=make_files(images),
        )
    )
