from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base


class Role(Base):
    __tablename__ = 'roles'
    # Assigned as max(role_id) + 1 by the repository, never by the caller
    role_id = Column(Integer, primary_key=True, autoincrement=False)
    role_name = Column(String(100), nullable=False)

    users = relationship("User", back_populates="role", lazy="raise", passive_deletes="all")


class User(Base):
    __tablename__ = 'users'
    user_id = Column(Integer, primary_key=True, autoincrement=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey('roles.role_id', ondelete='RESTRICT'), nullable=False)

    role = relationship("Role", back_populates="users", lazy="raise")

    __table_args__ = (
        Index('idx_users_role_id', 'role_id'),
    )
