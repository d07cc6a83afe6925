from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str


class SigninRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str


class UserResponse(BaseModel):
    user_id: str = Field(validation_alias="id", serialization_alias="userId")
    username: str
    email: str
    access_token: str = Field(serialization_alias="accessToken")

    model_config = {"from_attributes": True}
