"""Register use case."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator

from feed.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8, max_length=255)
    password_confirmation: str

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.password_confirmation:
            raise ValueError("The password confirmation does not match.")
        return self


class UserInfo(BaseModel):
    """Public user information."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime


class RegisterResponse(BaseModel):
    """Register response."""

    message: str = "User registered successfully"
    user: UserInfo
    token: str


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Raises:
            ConflictError: If the email is already registered
        """
        user = await self.user_service.register(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
        )
        token = self.jwt_service.create_token(str(user.id), user.email)
        return RegisterResponse(
            user=UserInfo(
                id=str(user.id),
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                created_at=user.created_at,
            ),
            token=token,
        )
