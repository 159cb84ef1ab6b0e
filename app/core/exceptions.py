"""
Error taxonomy shared by the storage layer and the API.

Storage functions raise these; ``main.py`` turns them into JSON responses
using ``status_code``.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404


class DuplicateLike(AppError):
    status_code = 409

    def __init__(self, message: str = "Already liked this profile"):
        super().__init__(message)


class BlockedInteraction(AppError):
    status_code = 403

    def __init__(self, message: str = "Interaction blocked between these users"):
        super().__init__(message)


class StoreFailure(AppError):
    status_code = 500
