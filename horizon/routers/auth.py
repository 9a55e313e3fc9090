"""
Sign-in, sign-up and session routes.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..constants import ApiRoutes, ApiTags, AuthFormTypes, HttpMessages
from ..dependencies import get_current_user, get_user_service
from ..exceptions import AuthenticationError
from ..models.auth import AuthFormDefinition, SignInForm, SignUpForm
from ..models.user import LogoutResponse, SessionResponse, User
from ..services.auth_forms import get_auth_form
from ..services.user_service import UserService
from ..utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix=ApiRoutes.AUTH_PREFIX, tags=[ApiTags.AUTH])


@router.get("/forms/{form_type}", response_model=AuthFormDefinition)
async def auth_form(form_type: str):
    """Definition of the sign-in or sign-up screen."""
    if form_type not in (AuthFormTypes.SIGN_IN, AuthFormTypes.SIGN_UP):
        raise HTTPException(status_code=404, detail=f"Unknown form '{form_type}'")
    return get_auth_form(form_type)


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    form: SignInForm,
    response: Response,
    user_service: UserService = Depends(get_user_service),
):
    """Open a session and set the session cookie."""
    session = await user_service.sign_in(form.email, form.password, response)
    if not session:
        raise AuthenticationError(HttpMessages.SIGN_IN_FAILED)
    return session


@router.post("/sign-up", response_model=User, status_code=201)
async def sign_up(
    form: SignUpForm,
    response: Response,
    user_service: UserService = Depends(get_user_service),
):
    """Create the account, open a session and set the session cookie."""
    new_user = await user_service.sign_up(form, response)
    if not new_user:
        raise HTTPException(status_code=400, detail=HttpMessages.SIGN_UP_FAILED)
    return new_user


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    user_service: UserService = Depends(get_user_service),
):
    """
    Clear the session cookie and end the session.

    The cookie is cleared even when the identity provider rejects the call.
    """
    result = await user_service.logout_account(request, response)
    if not result:
        logger.warning(HttpMessages.LOGOUT_FAILED)
    return LogoutResponse(success=bool(result))


@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)):
    """Get current authenticated user details."""
    return user
