from datetime import datetime

from pydantic import BaseModel, Field


class TaskResponse(BaseModel):
    task_id: str = Field(validation_alias="id", serialization_alias="taskId")
    user_id: str = Field(serialization_alias="userId")
    description: str
    done: bool
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
