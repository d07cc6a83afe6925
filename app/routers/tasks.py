from fastapi import APIRouter, Depends

from app.dependencies import authenticate_user, get_store
from app.schemas.task import TaskResponse
from app.store import UserStore
from app.utils.response import success_response

router = APIRouter(prefix="/tasks", tags=["tasks"], dependencies=[Depends(authenticate_user)])


# Any valid token may list any user's tasks; user_id is not matched
# against the token owner.
@router.get("/{user_id}", status_code=201)
async def list_tasks(user_id: str, store: UserStore = Depends(get_store)):
    tasks = await store.find_tasks_by_user(user_id)
    data = [TaskResponse.model_validate(t).model_dump(mode="json", by_alias=True) for t in tasks]
    return success_response(data)
