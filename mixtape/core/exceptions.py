# ============================================================================
# FILE: mixtape/core/exceptions.py
# ============================================================================
from fastapi import status


class MixtapeError(Exception):
    """Base error carrying the HTTP status and the message shown to the user"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidInput(MixtapeError):
    message = "Datos inválidos"


class DuplicateUsername(MixtapeError):
    message = "Usuario ya existe"


class NoSuchUser(MixtapeError):
    message = "Usuario inexistente"


class WrongPassword(MixtapeError):
    message = "Contraseña incorrecta"


class NotFound(MixtapeError):
    # Also raised for resources owned by someone else
    status_code = status.HTTP_404_NOT_FOUND
    message = "No encontrada"


class Unauthenticated(MixtapeError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token"


class InvalidToken(Unauthenticated):
    message = "Token inválido"


class TokenExpired(InvalidToken):
    pass
