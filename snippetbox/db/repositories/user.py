"""
User repository.

Registration, credential checks and existence probes for :class:`User`.
"""

from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from snippetbox.core import security
from snippetbox.core.exceptions import DuplicateIdentityError, InvalidCredentialsError, StorageError
from snippetbox.models.user import UNIQUE_EMAIL_CONSTRAINT, User

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_ENTRY = 1062


def is_duplicate_email(exc: IntegrityError) -> bool:
    """
    Return ``True`` if *exc* is a violation of the unique email constraint.

    Inspects the structured error data each driver exposes rather than
    just the message, so other integrity failures are not misreported.
    """
    orig = exc.orig

    # psycopg / psycopg2
    diag = getattr(orig, "diag", None)
    constraint_name: Optional[str] = getattr(diag, "constraint_name", None)
    if constraint_name is not None:
        return constraint_name == UNIQUE_EMAIL_CONSTRAINT

    # sqlite3 does not report constraint names, only the columns
    sqlite_errorname = getattr(orig, "sqlite_errorname", None)
    if sqlite_errorname is not None:
        return sqlite_errorname == "SQLITE_CONSTRAINT_UNIQUE" and "users.email" in str(orig)

    # PyMySQL / mysqlclient: (errno, message)
    args = getattr(orig, "args", ())
    if len(args) >= 2 and args[0] == MYSQL_DUPLICATE_ENTRY:
        return UNIQUE_EMAIL_CONSTRAINT in str(args[1])

    return False


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, engine: Engine):
        """
        Initialize repository with the shared database engine.

        Args:
            engine: Pooled SQLAlchemy engine owned by the process
        """
        self.engine = engine

    def register(self, name: str, email: str, password: str) -> int:
        """
        Create a new user with a hashed password.

        Args:
            name: Display name
            email: Login email, unique across users
            password: Plaintext password, hashed before storage

        Returns:
            Generated user id

        Raises:
            ValueError: If any input is empty
            DuplicateIdentityError: If the email is already registered
            StorageError: On any other database or hashing failure, including
                a password longer than bcrypt accepts
        """
        if not name or not email or not password:
            raise ValueError("Name, email and password must not be empty")

        try:
            hashed_password = security.get_password_hash(password)
        except (ValueError, TypeError) as exc:
            raise StorageError("Password could not be hashed") from exc

        user = User(name=name, email=email, hashed_password=hashed_password)
        try:
            with Session(self.engine) as session:
                session.add(user)
                session.commit()
                session.refresh(user)
                return user.id
        except IntegrityError as exc:
            if is_duplicate_email(exc):
                raise DuplicateIdentityError(email) from exc
            raise StorageError("Failed to insert user") from exc
        except SQLAlchemyError as exc:
            raise StorageError("Failed to insert user") from exc

    def authenticate(self, email: str, password: str) -> int:
        """
        Verify an email and password pair.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            Id of the matching user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
            StorageError: If the lookup fails or the stored hash is corrupt
        """
        statement = select(User.id, User.hashed_password).where(User.email == email)
        try:
            with Session(self.engine) as session:
                row = session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to look up user") from exc

        if row is None:
            raise InvalidCredentialsError()

        user_id, hashed_password = row
        try:
            matches = security.verify_password(password, hashed_password)
        except ValueError as exc:
            raise StorageError("Stored password hash is invalid", context={"user_id": user_id}) from exc

        if not matches:
            raise InvalidCredentialsError()
        return user_id

    def exists(self, user_id: int) -> bool:
        """
        Check whether a user with the given id exists.

        Returns ``False`` for a missing row. Only genuine database
        failures raise :class:`StorageError`.
        """
        statement = select(User.id).where(User.id == user_id)
        try:
            with Session(self.engine) as session:
                return session.exec(statement).first() is not None
        except SQLAlchemyError as exc:
            raise StorageError("Failed to check user existence") from exc
