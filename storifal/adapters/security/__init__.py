"""Security adapters - password hashing, signed tokens, email domain policy."""

from .bcrypt_hasher import BcryptPasswordHasher
from .disposable import BlocklistDisposablePolicy
from .jose_tokens import JoseTokenIssuer

__all__ = ["BcryptPasswordHasher", "BlocklistDisposablePolicy", "JoseTokenIssuer"]
