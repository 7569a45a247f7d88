from pydantic import BaseModel, ConfigDict, Field


class RoleBase(BaseModel):
    role_name: str = Field(min_length=1, max_length=100)


class RoleCreate(RoleBase):
    # Accepted for compatibility but ignored: role ids are always max + 1
    role_id: int | None = None


class RoleUpdate(RoleBase):
    role_id: int | None = None


class Role(RoleBase):
    role_id: int
    model_config = ConfigDict(from_attributes=True)


class UserBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    password_hash: str = Field(min_length=1, max_length=255)
    role_id: int


class UserCreate(UserBase):
    user_id: int


class UserUpdate(UserBase):
    user_id: int | None = None


class User(UserBase):
    user_id: int
    model_config = ConfigDict(from_attributes=True)
