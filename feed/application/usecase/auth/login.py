"""Login use case."""

from pydantic import BaseModel

from feed.domain.service import JWTService, UserService

from .register import UserInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    message: str = "Login successful"
    user: UserInfo
    token: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify credentials via user service
        2. Issue a JWT for the user

        Raises:
            ValidationError: If the credentials are incorrect
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.email)
        return LoginResponse(
            user=UserInfo(
                id=str(user.id),
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                created_at=user.created_at,
            ),
            token=token,
        )
