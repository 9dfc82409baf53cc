"""ORM model for the credential store."""

from sqlalchemy import CheckConstraint, Column, Integer, String

from app.models.base import Base

USER_ROLES = ("admin", "user")


class User(Base):
    """
    User account. Only the bcrypt hash of the password is stored.

    role: 'admin' or 'user'
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN (" + ", ".join(f"'{role}'" for role in USER_ROLES) + ")",
            name="ck_users_role",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
