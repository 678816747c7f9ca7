"""POST /api/auth/login - Operator login"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_manager.api.dependencies import get_request_id
from credit_manager.api.schemas import LoginRequest, TokenResponse, UserSchema
from credit_manager.domain.exceptions import AuthenticationError
from credit_manager.infrastructure.database.session import get_db
from credit_manager.services import auth as auth_service

router = APIRouter()


@router.post("/auth/login", response_model=TokenResponse)
def login(request_body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    try:
        result = auth_service.login(db, request_body.email, request_body.password)
    except AuthenticationError as e:
        logging.warning("Login rejected", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=401, detail=str(e))

    return TokenResponse(
        access_token=result.token,
        user=UserSchema(id=str(result.user.id), email=result.user.email, name=result.user.name),
    )
