from pydantic import BaseModel, ConfigDict, EmailStr, Field

# ✅ input: POST /register
class RegisterRequest(BaseModel):
    name: str = Field(..., max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)

# ✅ input: POST /login
class LoginRequest(BaseModel):
    email: EmailStr
    password: str

# ✅ output
class User(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

# ✅ output: register / login
class TokenResponse(BaseModel):
    user: User
    token: str
    token_type: str = "Bearer"
