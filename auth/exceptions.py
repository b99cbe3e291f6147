"""
Auth error taxonomy.

Four families, each with the HTTP status the boundary should answer with:
- CredentialInvalid: bad password, bad signature, expired, revoked (401)
- MalformedInput: unparsable header or token content (401 for every current caller)
- ResourceFailure: store, hashing or entropy failures (500, never retried here)
- ConfigurationFault: missing signing secret (fatal at startup)
"""


class AuthError(Exception):
    """Base auth exception with HTTP status."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class CredentialInvalid(AuthError):
    status_code = 401


class InvalidCredentials(CredentialInvalid):
    """Wrong password, or no such account."""


class InvalidSignature(CredentialInvalid):
    pass


class Expired(CredentialInvalid):
    pass


class Unauthenticated(CredentialInvalid):
    """Refresh token unknown, revoked or expired. Deliberately one error for all three."""


class MalformedInput(AuthError):
    status_code = 401


class MalformedToken(MalformedInput):
    pass


class InvalidSubject(MalformedInput):
    pass


class HeaderError(MalformedInput):
    def __init__(self, message: str, scheme: str):
        super().__init__(message)
        self.scheme = scheme


class MissingHeader(HeaderError):
    pass


class MalformedHeader(HeaderError):
    pass


class WrongScheme(HeaderError):
    pass


class ResourceFailure(AuthError):
    status_code = 500


class HashingFailure(ResourceFailure):
    pass


class EntropyFailure(ResourceFailure):
    pass


class StoreFailure(ResourceFailure):
    pass


class ConfigurationFault(AuthError):
    status_code = 500
