from enum import Enum

import structlog
from pydantic import ValidationError

from ..domain.entities import User
from ..domain.errors import ConsoleError, ValidationFailed
from .context import AppContext
from .navigation import Navigator, ViewName
from .schemas import LoginReq, RegisterReq

logger = structlog.get_logger(__name__)

PASSWORD_RULES = "Please fill all fields and ensure password is at least 6 characters."


class AuthPage(str, Enum):
    LOGIN = "login"
    REGISTER = "register"


class ConsoleApp:
    """Оболочка приложения: сессия пользователя и навигация."""

    def __init__(self, context: AppContext):
        self.context = context
        self.user: User | None = None
        self.auth_page = AuthPage.LOGIN
        self.auth_loading = False
        self.navigator: Navigator | None = None

    @property
    def notifications(self):
        return self.context.notifications

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def show_login(self) -> None:
        self.auth_page = AuthPage.LOGIN

    def show_register(self) -> None:
        self.auth_page = AuthPage.REGISTER

    async def _start_session(self, user: User) -> None:
        self.user = user
        self.navigator = Navigator(self.context)
        logger.info("user_logged_in", user_id=user.id, role=user.role.value)
        await self.navigator.navigate(ViewName.DASHBOARD)

    async def login(self, email: str, credential: str) -> bool:
        try:
            LoginReq(email=email, password=credential)
        except ValidationError:
            self.notifications.error("Invalid credentials")
            return False
        self.auth_loading = True
        try:
            user = await self.context.facade.auth.login(email, credential)
        except ConsoleError as e:
            self.notifications.error(str(e) or "Invalid credentials")
            return False
        finally:
            self.auth_loading = False
        self.notifications.success("Logged in successfully")
        await self._start_session(user)
        return True

    def _check_registration(self, name: str, email: str, credential: str, confirm: str) -> None:
        if credential != confirm:
            raise ValidationFailed("Passwords do not match")
        try:
            RegisterReq(name=name, email=email, password=credential)
        except ValidationError as e:
            raise ValidationFailed(PASSWORD_RULES) from e

    async def register(self, name: str, email: str, credential: str, confirm: str) -> bool:
        try:
            self._check_registration(name, email, credential, confirm)
        except ValidationFailed as e:
            self.notifications.error(str(e))
            return False
        self.auth_loading = True
        try:
            user = await self.context.facade.auth.register(name, email, credential)
        except ConsoleError as e:
            self.notifications.error(str(e) or "Registration failed")
            return False
        finally:
            self.auth_loading = False
        self.notifications.success("Registration successful! Logging you in.")
        await self._start_session(user)
        return True

    def logout(self) -> None:
        if self.navigator is not None:
            self.navigator.close()
        self.navigator = None
        if self.user is not None:
            logger.info("user_logged_out", user_id=self.user.id)
        self.user = None
        self.auth_page = AuthPage.LOGIN
