"""
SQLAlchemy ORM models for the ``users`` and ``messages`` tables.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    username = Column(Text, primary_key=True)
    password = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    join_at = Column(DateTime(timezone=True), nullable=False)
    last_login_at = Column(DateTime(timezone=True))

    sent_messages = relationship(
        "Message", foreign_keys="Message.from_username", back_populates="from_user",
    )
    received_messages = relationship(
        "Message", foreign_keys="Message.to_username", back_populates="to_user",
    )


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_username = Column(Text, ForeignKey("users.username"), nullable=False)
    to_username = Column(Text, ForeignKey("users.username"), nullable=False)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False)
    read_at = Column(DateTime(timezone=True), nullable=True)

    from_user = relationship("User", foreign_keys=[from_username], back_populates="sent_messages")
    to_user = relationship("User", foreign_keys=[to_username], back_populates="received_messages")
