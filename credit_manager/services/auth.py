"""Operator authentication"""

from typing import NamedTuple
from sqlalchemy.orm import Session

from credit_manager.domain.exceptions import AuthenticationError
from credit_manager.infrastructure.database.models import User
from credit_manager.infrastructure.database.repositories import UserRepository
from credit_manager.infrastructure.security import create_access_token, hash_password, verify_password


class LoginResult(NamedTuple):
    token: str
    user: User


def login(db: Session, email: str, password: str) -> LoginResult:
    """
    Exchange operator credentials for an access token.

    Raises:
        AuthenticationError: Unknown email or wrong password (same message for both)
    """
    user = UserRepository(db).get_by_email(email.strip().lower())
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid email or password")

    return LoginResult(token=create_access_token(str(user.id)), user=user)


def ensure_user(db: Session, email: str, password: str, name: str) -> bool:
    """Create the operator account if missing; returns True when one was created"""
    repo = UserRepository(db)
    email = email.strip().lower()
    if repo.get_by_email(email) is not None:
        return False

    repo.create_user(email=email, name=name, password_hash=hash_password(password))
    db.commit()
    return True
