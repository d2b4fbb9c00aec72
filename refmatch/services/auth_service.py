"""Auth service - registration, login and password hashing."""

from passlib.context import CryptContext

from refmatch.core.errors import ConflictError, UnauthorizedError
from refmatch.core.logger import logger
from refmatch.db.store import Store

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


class AuthService:
    @staticmethod
    async def register(
        store: Store,
        email: str,
        password: str,
        name: str = "",
        relationship_status: str = "single",
    ):
        """Create a profile with hashed credentials. Emails are case-insensitive."""
        if await store.get_profile_by_email(email) is not None:
            raise ConflictError("Email already exists")

        profile = await store.insert_profile(
            email=email,
            password_hash=get_password_hash(password),
            name=name,
            relationship_status=relationship_status,
        )
        logger.info("Registered user {}", profile.id)
        return profile

    @staticmethod
    async def login(store: Store, email: str, password: str):
        profile = await store.get_profile_by_email(email)
        if profile is None or not verify_password(password, profile.password_hash):
            raise UnauthorizedError("Invalid credentials")
        return profile


auth_service = AuthService()
