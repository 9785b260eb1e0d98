"""
User endpoints.

Handles signup, login and logout. The logged-in user id lives in the
signed session cookie.
"""

from fastapi import APIRouter, Depends, Request, status

from snippetbox.api.dependencies import SESSION_USER_KEY, get_user_repository
from snippetbox.db.repositories import UserRepository
from snippetbox.schemas.user import UserCreate, UserIdResponse, UserLogin

router = APIRouter()


@router.post("/signup",
             summary="User registration endpoint.",
             response_model=UserIdResponse,
             status_code=status.HTTP_201_CREATED)
def signup(user_data: UserCreate, users: UserRepository = Depends(get_user_repository)):
    """
    Register a new user.

    Raises:
        DuplicateIdentityError: If the email is already registered (409)
    """
    user_id = users.register(user_data.name, user_data.email, user_data.password)
    return UserIdResponse(id=user_id)


@router.post("/login",
             summary="User login endpoint.",
             response_model=UserIdResponse)
def login(login_data: UserLogin, request: Request, users: UserRepository = Depends(get_user_repository)):
    """
    Authenticate and remember the user in the session.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password (401)
    """
    user_id = users.authenticate(login_data.email, login_data.password)
    request.session[SESSION_USER_KEY] = user_id
    return UserIdResponse(id=user_id)


@router.post("/logout", summary="User logout endpoint.")
def logout(request: Request):
    request.session.pop(SESSION_USER_KEY, None)
    return {"detail": "You've been logged out successfully"}
