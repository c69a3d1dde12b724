# imagegen/schemas/auth.py
from pydantic import BaseModel

from imagegen.models.user import UserRead

class AuthResponse(BaseModel):
    user: UserRead
    token: str
