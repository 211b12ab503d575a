"""
Access codes -- /publish and /auth/*.

GET    /publish        open issuance, no credentials
POST   /auth/issue     issuance gated by the master code
POST   /auth/verify    trade a code for the session key/value
POST   /auth/session   check a session value
DELETE /auth/revoke    drop a code (master code required)
"""

from fastapi import APIRouter, Depends

from wordbank.codes import CodeRegistry
from wordbank.deps import get_code_registry
from wordbank.models.schemas import (
    CodeIssued,
    CodeRevoked,
    CodeVerified,
    ErrorResponse,
    IssueRequest,
    RevokeRequest,
    SessionRequest,
    SessionVerified,
    VerifyCodeRequest,
)
from wordbank.validation import require_text

router = APIRouter(tags=["Access codes"])


@router.get(
    "/publish",
    response_model=CodeIssued,
    summary="Issue an access code (open)",
)
async def publish(registry: CodeRegistry = Depends(get_code_registry)) -> CodeIssued:
    issued = registry.issue()
    return CodeIssued(message="Access code issued", code=issued.code, expires_in=issued.expires_in)


@router.post(
    "/auth/issue",
    response_model=CodeIssued,
    summary="Issue an access code (master code required)",
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def issue(
    payload: IssueRequest | None = None,
    registry: CodeRegistry = Depends(get_code_registry),
) -> CodeIssued:
    master_code = require_text("masterCode", payload.master_code if payload else None)
    issued = registry.issue_privileged(master_code)
    return CodeIssued(message="Access code issued", code=issued.code, expires_in=issued.expires_in)


@router.post(
    "/auth/verify",
    response_model=CodeVerified,
    summary="Verify an access code",
    description="Returns the session key and value on success. An unknown code and an "
                "expired code get the same 401 response.",
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def verify(
    payload: VerifyCodeRequest | None = None,
    registry: CodeRegistry = Depends(get_code_registry),
) -> CodeVerified:
    code = require_text("code", payload.code if payload else None)
    grant = registry.verify(code)
    return CodeVerified(
        valid=True,
        message="Code verified",
        session_key=grant.session_key,
        session_value=grant.session_value,
    )


@router.post(
    "/auth/session",
    response_model=SessionVerified,
    summary="Check a session value",
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def verify_session(
    payload: SessionRequest | None = None,
    registry: CodeRegistry = Depends(get_code_registry),
) -> SessionVerified:
    session_value = require_text("sessionValue", payload.session_value if payload else None)
    registry.verify_session(session_value)
    return SessionVerified(valid=True, message="Session valid")


@router.delete(
    "/auth/revoke",
    response_model=CodeRevoked,
    summary="Revoke an access code",
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def revoke(
    payload: RevokeRequest | None = None,
    registry: CodeRegistry = Depends(get_code_registry),
) -> CodeRevoked:
    payload = payload or RevokeRequest()
    master_code = require_text("masterCode", payload.master_code)
    code = require_text("code", payload.code)

    revoked = registry.revoke(master_code, code)
    return CodeRevoked(message="Code revoked", code=revoked)
