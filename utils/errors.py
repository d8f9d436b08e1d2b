class NewsTickerError(Exception):
    status_code = 500
    message = "Interner Serverfehler"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(NewsTickerError):
    status_code = 400
    message = "Ungültige Anfrage"


class BadId(ValidationError):
    message = "Ungültige ID"


class AuthError(NewsTickerError):
    status_code = 401
    message = "Nicht autorisiert"


class MissingToken(AuthError):
    message = "Kein Token bereitgestellt"


class InvalidToken(AuthError):
    status_code = 403
    message = "Ungültiger Token"


class InvalidCredentials(AuthError):
    message = "Ungültige Anmeldedaten"


class NotFoundError(NewsTickerError):
    status_code = 404
    message = "Nicht gefunden"


class StoreError(NewsTickerError):
    message = "Datenbankfehler"


class DatabaseConnectionError(StoreError):
    message = "Failed to connect to MongoDB"
