"""
ORM tables

One declarative class per entity. Pydantic models in ``clubhouse.club.models``
and ``clubhouse.auth.models`` are built from these with ``model_validate``.
"""
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Integer columns are 32-bit on most stores
INT32_MAX = 2**31 - 1


class Base(DeclarativeBase):
    pass


match_players = Table(
    "match_players",
    Base.metadata,
    Column("match_id", ForeignKey("matches.id", ondelete="CASCADE"), primary_key=True),
    Column("player_id", ForeignKey("players.id", ondelete="CASCADE"), primary_key=True),
)


class TeamTable(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    goals_for: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    goals_against: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    players: Mapped[List["PlayerTable"]] = relationship(back_populates="team")
    coaches: Mapped[List["CoachTable"]] = relationship(back_populates="team")


class PlayerTable(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[str] = mapped_column(String(64), nullable=False)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(512))
    team_id: Mapped[Optional[int]] = mapped_column(ForeignKey("teams.id", ondelete="SET NULL"))

    team: Mapped[Optional[TeamTable]] = relationship(back_populates="players")
    stat: Mapped[Optional["StatsTable"]] = relationship(
        back_populates="player", uselist=False, cascade="all, delete-orphan"
    )
    matches: Mapped[List["MatchTable"]] = relationship(
        secondary=match_players, back_populates="players"
    )


class CoachTable(Base):
    __tablename__ = "coaches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    job: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(512))
    team_id: Mapped[Optional[int]] = mapped_column(ForeignKey("teams.id", ondelete="SET NULL"))

    team: Mapped[Optional[TeamTable]] = relationship(back_populates="coaches")


class MatchTable(Base):
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    home_team_name: Mapped[str] = mapped_column(String(255), nullable=False)
    away_team_name: Mapped[str] = mapped_column(String(255), nullable=False)
    home_score: Mapped[Optional[int]] = mapped_column(Integer)
    away_score: Mapped[Optional[int]] = mapped_column(Integer)

    players: Mapped[List[PlayerTable]] = relationship(
        secondary=match_players, back_populates="matches"
    )


class StatsTable(Base):
    __tablename__ = "stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    player_id: Mapped[int] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    appearances: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    goals: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    assists: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    player: Mapped[PlayerTable] = relationship(back_populates="stat")


class UserTable(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="User")
