from pydantic import BaseModel
from typing import Optional

# Request fields are optional so that missing values surface as
# {"error": ...} responses from the key store instead of validation errors.

class RegisterRequest(BaseModel):
    username: Optional[str] = None
    time: Optional[str] = None

class RegisterResponse(BaseModel):
    apiKey: str
    expiresAt: Optional[int] = None

class LoginRequest(BaseModel):
    apiKey: Optional[str] = None
    hwid: Optional[str] = None

class LoginResponse(BaseModel):
    success: bool = True
    # 0 for lifetime keys, kept for existing clients
    expiresAt: int = 0

class KeyRequest(BaseModel):
    apiKey: Optional[str] = None

class KeyListItem(BaseModel):
    key: str
    username: str
    hwid: Optional[str] = None
    expiresAt: Optional[int] = None

class SuccessResponse(BaseModel):
    success: bool = True
