"""
Use case: Change the authenticated admin's first and last name.

Failure cases: AdminValidationError, AdminNotFoundError.
"""

import logging

from app.application.admin.dtos import EditProfileCommand
from app.domain.admin.errors import AdminNotFoundError, AdminValidationError
from app.domain.admin.ports import AdminRepository

logger = logging.getLogger(__name__)


class EditAdminProfileUseCase:
    def __init__(self, admin_repo: AdminRepository) -> None:
        self._admin_repo = admin_repo

    async def execute(self, command: EditProfileCommand) -> None:
        firstname = (command.firstname or "").strip()
        lastname = (command.lastname or "").strip()
        if not firstname or not lastname:
            raise AdminValidationError("First name and last name are required")

        if not await self._admin_repo.update_name(command.admin_id, firstname, lastname):
            raise AdminNotFoundError(command.admin_id)
        logger.info("Admin id=%s updated their profile", command.admin_id)
