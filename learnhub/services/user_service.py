# learnhub/services/user_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learnhub.core.errors import InvalidInput, NotFound
from learnhub.db.session import commit
from learnhub.models.user import ROLE_ADMIN, ROLE_NORMAL, ROLE_TEACHER, ROLES, User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def validate_role(role: str) -> str:
    if role not in ROLES:
        raise InvalidInput(f"Unknown role '{role}', expected one of {', '.join(ROLES)}")
    return role


def register_user(
    db: Session,
    *,
    email: str,
    name: str | None = None,
    image: str | None = None,
    role: str = ROLE_NORMAL,
) -> tuple[User, bool]:
    """
    Idempotent registration. Returns (user, created); an existing email
    returns the stored user and writes nothing.
    """
    email = email.lower()
    validate_role(role)
    existing = get_user_by_email(db, email)
    if existing:
        return existing, False

    user = User(email=email, name=name, image=image, role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race on the unique email; the winner's record is the answer
        db.rollback()
        existing = get_user_by_email(db, email)
        if existing is None:
            raise
        return existing, False
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({email}) as {role}")
    return user, True


def set_role(db: Session, *, user: User, role: str, flush_only: bool = False) -> User:
    """
    Overwrite the user's role. With ``flush_only`` the change joins the
    caller's transaction instead of committing on its own.
    """
    validate_role(role)
    user.role = role
    db.add(user)
    if flush_only:
        db.flush()
        return user
    commit(db, action=f"set role of user {user.id}")
    db.refresh(user)
    logger.info(f"User {user.id} role set to {role}")
    return user


def _has_role(db: Session, email: str, role: str, *, strict: bool) -> bool:
    user = get_user_by_email(db, email)
    if user is None:
        if strict:
            raise NotFound("User not found")
        return False
    return user.role == role


def is_admin(db: Session, email: str, *, strict: bool = False) -> bool:
    """Absent users are not admins, unless ``strict`` asks for a NotFound."""
    return _has_role(db, email, ROLE_ADMIN, strict=strict)


def is_teacher(db: Session, email: str, *, strict: bool = False) -> bool:
    return _has_role(db, email, ROLE_TEACHER, strict=strict)


def list_users(
    db: Session,
    *,
    search: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> List[User]:
    query = db.query(User)
    if search:
        query = query.filter(User.email.ilike(f"%{search}%"))
    return query.order_by(User.id.asc()).offset(skip).limit(limit).all()


def delete_user(db: Session, *, user: User) -> None:
    """Classes and payments referencing the email are left in place."""
    user_id = user.id
    db.delete(user)
    commit(db, action=f"delete user {user_id}")
    logger.info(f"Deleted user {user_id}")


def count_users(db: Session) -> int:
    return db.query(User).count()
