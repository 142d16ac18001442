"""
Use case: Read the authenticated admin's profile.
"""

from app.application.admin.dtos import AdminProfile
from app.application.admin.login_admin import to_profile
from app.domain.admin.errors import AdminNotFoundError
from app.domain.admin.ports import AdminRepository


class GetAdminProfileUseCase:
    def __init__(self, admin_repo: AdminRepository) -> None:
        self._admin_repo = admin_repo

    async def execute(self, admin_id: int) -> AdminProfile:
        admin = await self._admin_repo.get(admin_id)
        if admin is None:
            raise AdminNotFoundError(admin_id)
        return to_profile(admin)
