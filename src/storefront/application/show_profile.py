"""Application service: Show Profile use case (the caller's own account)."""

from __future__ import annotations

from storefront.application.dto import UserDTO
from storefront.application.lookups import require_user
from storefront.application.views import user_dto
from storefront.domain.authorization import Subject
from storefront.domain.repository.user_repository import UserRepository


class ShowProfileHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, subject: Subject) -> UserDTO:
        return user_dto(require_user(self._user_repo, subject.user_id))
