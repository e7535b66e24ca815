from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.application.pagination import Page, normalize_paging
from travel_api.domain.entities.user import UserAccount

DEFAULT_USERS_PAGE_SIZE = 5


class ListUsersUseCase:
    def __init__(self, user_repo: UserRepo) -> None:
        self._user_repo = user_repo

    async def execute(self, page: int | None = None, limit: int | None = None) -> Page[UserAccount]:
        page, limit = normalize_paging(page, limit, DEFAULT_USERS_PAGE_SIZE)
        items = await self._user_repo.list_page(offset=(page - 1) * limit, limit=limit)
        total = await self._user_repo.count()
        return Page(items=items, total=total, page=page, limit=limit)
