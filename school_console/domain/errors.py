class ConsoleError(Exception):
    """Базовая ошибка, которую контроллеры показывают пользователю."""


class NotFound(ConsoleError):
    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} {entity_id!r} not found")
        self.kind = kind
        self.entity_id = entity_id


class InvalidCredentials(ConsoleError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class DuplicateUser(ConsoleError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class ValidationFailed(ConsoleError):
    pass
