"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import CheckConstraint, Column, Integer, String

from film_api.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    username is stored lowercase; role: 'admin' or 'user'.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default="user", server_default="user")
