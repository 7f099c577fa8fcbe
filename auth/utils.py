# backend/auth/utils.py
import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from typing import Optional
from errors import AuthenticationError

ALGORITHM = "HS256"

# bcrypt sólo considera los primeros 72 bytes
BCRYPT_MAX_BYTES = 72

# =====================================================
# 🔹 Hashing
# =====================================================
def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], bcrypt.gensalt()).decode()

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], hashed.encode("utf-8"))
    except ValueError:
        return False

# =====================================================
# 🔹 Tokens
# =====================================================
def create_access_token(data: dict, secret: str, expires_delta: timedelta,
                        now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({"iat": issued_at, "exp": issued_at + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)

def decode_access_token(token: Optional[str], secret: str) -> dict:
    """
    Verifica firma y expiración del token y devuelve sus claims.
    Cualquier token ausente, inválido o expirado termina en AuthenticationError.
    """
    if not token:
        raise AuthenticationError("No autenticado")
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM], options={"require": ["exp", "sub"]})
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Sesión expirada")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Token inválido")
    return claims
