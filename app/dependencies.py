import logging

from fastapi import Depends, Header, Request

from app.store import UserStore
from app.utils.exceptions import Unauthorized

logger = logging.getLogger(__name__)


def get_store(request: Request) -> UserStore:
    return request.app.state.store


async def authenticate_user(
    authorization: str = Header(default=""),
    store: UserStore = Depends(get_store),
) -> None:
    # The header carries the raw token, no "Bearer " prefix.
    if not authorization:
        logger.debug("Rejected request without Authorization header")
        raise Unauthorized()
    user = await store.find_by_token(authorization)
    if user is None:
        logger.debug("Rejected request with unknown access token")
        raise Unauthorized()
