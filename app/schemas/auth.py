from pydantic import BaseModel, ConfigDict


class LoginIn(BaseModel):
    username: str
    password: str

    model_config = ConfigDict(extra="forbid")


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
