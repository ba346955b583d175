import logging
from datetime import datetime, UTC, timedelta
from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import settings
from utils.errors import UnauthorizedError, ForbiddenError

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (토큰 누락 시 401을 직접 반환하기 위해 auto_error=False)
security = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """토큰 payload에서 꺼낸 사용자 정보"""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    is_admin: bool = Field(default=False, alias="isAdmin")


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """token decoding"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        logger.debug("Expired token rejected")
        raise UnauthorizedError("token is expired")
    except jwt.InvalidTokenError:
        logger.warning("Invalid token rejected")
        raise UnauthorizedError("invalid token")


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> TokenUser:
    """현재 로그인한 유저 반환 (없으면 401)"""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if not payload.get("username"):
        raise UnauthorizedError("invalid token")
    try:
        return TokenUser.model_validate(payload)
    except ValidationError:
        logger.warning("Token claims rejected")
        raise UnauthorizedError("invalid token")


CurrentUser = Annotated[TokenUser, Depends(get_current_user)]


def require_admin(user: CurrentUser) -> TokenUser:
    """관리자 권한 확인 (아니면 403)"""
    if not user.is_admin:
        raise ForbiddenError("Admin privileges required")
    return user


AdminUser = Annotated[TokenUser, Depends(require_admin)]
