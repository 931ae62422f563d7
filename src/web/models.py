"""
Pydantic models for the roster web API.

Defines request/response schemas for the team and tournament endpoints.
"""
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Dict, Optional

from src.roster.io import PlayerSchema
from src.utils.constants import DEFAULT_LABEL_A, DEFAULT_LABEL_B


class BalanceRequest(BaseModel):
    """Request to split eligible players into two teams."""
    players: List[PlayerSchema]
    label_a: str = Field(default=DEFAULT_LABEL_A, min_length=1)
    label_b: str = Field(default=DEFAULT_LABEL_B, min_length=1)
    seed: Optional[int] = Field(default=None, description="Seed for reproducible tie shuffling")


class TeamSchema(BaseModel):
    """One team of a split."""
    label: str
    forwards: List[PlayerSchema]
    defensemen: List[PlayerSchema]
    avg_skill: float


class BalanceResponse(BaseModel):
    """Both teams of a split."""
    teams: List[TeamSchema]


class CreateTournamentRequest(BaseModel):
    """Request to start a ranking tournament."""
    players: List[PlayerSchema]
    seed: Optional[int] = Field(default=None, description="Seed for reproducible scheduling")


class MatchupSchema(BaseModel):
    """A comparison between two tournament players."""
    id: str
    player1_id: str
    player2_id: str
    winner_id: Optional[str] = None
    timestamp: Optional[datetime] = None


class RankingSchema(BaseModel):
    """Final standing of one player."""
    player_id: str
    name: str
    rank: int
    rating: float
    score: int
    confidence: float
    matches_played: int


class TournamentState(BaseModel):
    """Complete tournament state for API responses."""
    tournament_id: str
    phase: str
    players: Dict[str, str]  # tournament id -> name
    current_matchup: Optional[MatchupSchema] = None
    total_matchups: int
    completed_matchups: int
    progress_percentage: float
    rankings: List[RankingSchema] = []


class ResultRequest(BaseModel):
    """Winner of the current matchup."""
    winner_id: str


class ApplyResponse(BaseModel):
    """Roster with tournament scores applied."""
    players: List[PlayerSchema]
