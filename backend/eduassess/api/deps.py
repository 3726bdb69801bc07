import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eduassess.core.security import Identity, decode_access_token

bearer = HTTPBearer(auto_error=False)

def get_identity(credentials: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Identity:
    if credentials is None or not credentials.credentials:
        raise HTTPException(401, "Access token required")
    try:
        return decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise HTTPException(403, "Invalid or expired token")

def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    if not identity.is_admin:
        raise HTTPException(403, "Admin access required")
    return identity
