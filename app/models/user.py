from pydantic import BaseModel, Field
from app.models.common import CamelInput, CamelModel

# Token Schemas
class Token(BaseModel):
    access_token: str
    token_type: str

# User Schemas
class UserCreate(CamelInput):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=6)

class UserLogin(CamelInput):
    username: str
    password: str

class UserResponse(CamelModel):
    id: int
    username: str
    is_admin: bool = False

class AuthResponse(BaseModel):
    user: UserResponse
    token: Token
