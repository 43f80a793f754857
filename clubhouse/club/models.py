"""
Club Models

Pydantic models for the club entities. Input models carry the field checks
so a bad request is rejected before it reaches the database; the entity models
extend them and are built from ORM rows with ``model_validate``.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date, datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from clubhouse.database.tables import INT32_MAX

# Counters, numbers and foreign keys must fit an INTEGER column
BoundedInt = Annotated[int, Field(le=INT32_MAX)]


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(message)
    return value


def _non_negative(
    value: Optional[int], message: str, allow_none: bool = False, required: Optional[str] = None
) -> Optional[int]:
    if value is None:
        if allow_none:
            return value
        raise ValueError(required or message)
    if value < 0:
        raise ValueError(message)
    return value


class ClubModel(BaseModel):
    """Shared config: camelCase aliases, construction from ORM rows"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================
# Stats
# =============================================

class StatsInput(ClubModel):
    """Season statistics of a player"""
    appearances: BoundedInt = 0
    goals: BoundedInt = 0
    assists: BoundedInt = 0

    @field_validator("appearances")
    @classmethod
    def validate_appearances(cls, v):
        return _non_negative(v, "Appearances cannot be negative.", required="Appearances is required")

    @field_validator("goals")
    @classmethod
    def validate_goals(cls, v):
        return _non_negative(v, "Goals cannot be negative.", required="Goals is required")

    @field_validator("assists")
    @classmethod
    def validate_assists(cls, v):
        return _non_negative(v, "Assists cannot be negative.", required="Assists is required")


class Stats(StatsInput):
    id: int
    player_id: int


class PlayerStatUpdate(StatsInput):
    """Stats block sent along with a player update"""
    id: Optional[BoundedInt] = None


# =============================================
# Player
# =============================================

class PlayerInput(ClubModel):
    """Request body for adding a player"""
    name: str
    number: BoundedInt
    position: str
    birthdate: date
    image_url: Optional[str] = None
    team_id: Optional[BoundedInt] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name is required")

    @field_validator("position")
    @classmethod
    def validate_position(cls, v):
        return _require_text(v, "Position is required")

    @field_validator("number")
    @classmethod
    def validate_number(cls, v):
        return _non_negative(v, "Number cannot be negative.", required="Number is required")

    @field_validator("birthdate", mode="before")
    @classmethod
    def validate_birthdate_present(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Birthdate is required")
        return v

    @field_validator("birthdate")
    @classmethod
    def validate_birthdate(cls, v):
        if isinstance(v, datetime):
            v = v.date()
        if v > date.today():
            raise ValueError("Birthdate cannot be in the future")
        return v


class PlayerUpdate(ClubModel):
    """Request body for updating a player; only sent fields change"""
    name: Optional[str] = None
    number: Optional[BoundedInt] = None
    position: Optional[str] = None
    birthdate: Optional[date] = None
    image_url: Optional[str] = None
    team_id: Optional[BoundedInt] = None
    stat: Optional[PlayerStatUpdate] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name is required")

    @field_validator("position")
    @classmethod
    def validate_position(cls, v):
        return _require_text(v, "Position is required")

    @field_validator("number")
    @classmethod
    def validate_number(cls, v):
        return _non_negative(v, "Number cannot be negative.", required="Number is required")

    @field_validator("birthdate")
    @classmethod
    def validate_birthdate(cls, v):
        if v is None:
            raise ValueError("Birthdate is required")
        if v > date.today():
            raise ValueError("Birthdate cannot be in the future")
        return v

    def player_fields(self) -> dict:
        """Fields that belong to the player row itself"""
        return self.model_dump(exclude_unset=True, exclude={"stat"})


class Player(PlayerInput):
    id: int
    stat: Optional[Stats] = None


# =============================================
# Coach
# =============================================

class CoachInput(ClubModel):
    """Request body for adding a coach"""
    name: str
    job: str
    image_url: Optional[str] = None
    team_id: Optional[BoundedInt] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name is required")

    @field_validator("job")
    @classmethod
    def validate_job(cls, v):
        return _require_text(v, "Job is required")


class CoachUpdate(ClubModel):
    name: Optional[str] = None
    job: Optional[str] = None
    image_url: Optional[str] = None
    team_id: Optional[BoundedInt] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name is required")

    @field_validator("job")
    @classmethod
    def validate_job(cls, v):
        return _require_text(v, "Job is required")


class Coach(CoachInput):
    id: int


# =============================================
# Team
# =============================================

class TeamInput(ClubModel):
    """Request body for adding a team; standings start at zero"""
    name: str
    goals_for: BoundedInt = 0
    goals_against: BoundedInt = 0
    points: BoundedInt = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name cannot be empty.")

    @field_validator("goals_for")
    @classmethod
    def validate_goals_for(cls, v):
        return _non_negative(v, "Goals for cannot be negative.", required="Goals for is required")

    @field_validator("goals_against")
    @classmethod
    def validate_goals_against(cls, v):
        return _non_negative(v, "Goals against cannot be negative.", required="Goals against is required")

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        return _non_negative(v, "Points cannot be negative.", required="Points is required")


class TeamUpdate(ClubModel):
    name: Optional[str] = None
    goals_for: Optional[BoundedInt] = None
    goals_against: Optional[BoundedInt] = None
    points: Optional[BoundedInt] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Name cannot be empty.")

    @field_validator("goals_for")
    @classmethod
    def validate_goals_for(cls, v):
        return _non_negative(v, "Goals for cannot be negative.", required="Goals for is required")

    @field_validator("goals_against")
    @classmethod
    def validate_goals_against(cls, v):
        return _non_negative(v, "Goals against cannot be negative.", required="Goals against is required")

    @field_validator("points")
    @classmethod
    def validate_points(cls, v):
        return _non_negative(v, "Points cannot be negative.", required="Points is required")


class Team(TeamInput):
    id: int
    players: List[Player] = []
    coaches: List[Coach] = []


# =============================================
# Match
# =============================================

class MatchInput(ClubModel):
    """Request body for adding a match; scores stay empty until played"""
    location: str
    date: datetime
    home_team_name: str
    away_team_name: str
    home_score: Optional[BoundedInt] = None
    away_score: Optional[BoundedInt] = None

    @field_validator("location")
    @classmethod
    def validate_location(cls, v):
        return _require_text(v, "Location is required")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Date is required")
        return v

    @field_validator("home_team_name")
    @classmethod
    def validate_home_team_name(cls, v):
        return _require_text(v, "Home team name is required")

    @field_validator("away_team_name")
    @classmethod
    def validate_away_team_name(cls, v):
        return _require_text(v, "Away team name is required")

    @field_validator("home_score")
    @classmethod
    def validate_home_score(cls, v):
        return _non_negative(v, "Home score cannot be negative", allow_none=True)

    @field_validator("away_score")
    @classmethod
    def validate_away_score(cls, v):
        return _non_negative(v, "Away score cannot be negative", allow_none=True)


class MatchUpdate(ClubModel):
    location: Optional[str] = None
    date: Optional[datetime] = None
    home_team_name: Optional[str] = None
    away_team_name: Optional[str] = None
    home_score: Optional[BoundedInt] = None
    away_score: Optional[BoundedInt] = None

    @field_validator("location")
    @classmethod
    def validate_location(cls, v):
        return _require_text(v, "Location is required")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Date is required")
        return v

    @field_validator("home_team_name")
    @classmethod
    def validate_home_team_name(cls, v):
        return _require_text(v, "Home team name is required")

    @field_validator("away_team_name")
    @classmethod
    def validate_away_team_name(cls, v):
        return _require_text(v, "Away team name is required")

    @field_validator("home_score")
    @classmethod
    def validate_home_score(cls, v):
        return _non_negative(v, "Home score cannot be negative", allow_none=True)

    @field_validator("away_score")
    @classmethod
    def validate_away_score(cls, v):
        return _non_negative(v, "Away score cannot be negative", allow_none=True)


class Match(MatchInput):
    id: int
    players: List[Player] = []


class MatchPlayersInput(ClubModel):
    """Request body for linking players to a match"""
    player_ids: List[BoundedInt]

    @field_validator("player_ids", mode="before")
    @classmethod
    def validate_player_ids(cls, v):
        if not isinstance(v, list):
            raise ValueError("player_ids must be an array")
        return v


class MessageResponse(BaseModel):
    status: str = "success"
    message: str
