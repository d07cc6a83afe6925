import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_store
from app.schemas.auth import SigninRequest, SignupRequest, UserResponse
from app.services.credentials import check_password_policy, hash_password, verify_password
from app.store import UserStore
from app.utils.exceptions import NotFoundOrMismatch
from app.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", status_code=201)
async def signup(request: SignupRequest, store: UserStore = Depends(get_store)):
    check_password_policy(request.password)

    user = await store.create(
        username=request.username,
        email=request.email,
        password_hash=hash_password(request.password),
    )
    logger.info("Created user %s (%s)", user.username, user.id)

    return success_response(UserResponse.model_validate(user).model_dump(by_alias=True))


@router.post("/signin")
async def signin(request: SigninRequest, store: UserStore = Depends(get_store)):
    user = await store.find_by_username(request.username)

    # Unknown user and wrong password must be indistinguishable.
    if user is None or not verify_password(request.password, user.password_hash):
        logger.info("Failed signin for username=%s", request.username)
        raise NotFoundOrMismatch()

    return success_response(UserResponse.model_validate(user).model_dump(by_alias=True))
