"""
FastAPI application for the roster tools.
"""
import random

from fastapi import FastAPI, HTTPException

from src.web.models import (
    BalanceRequest, BalanceResponse, TeamSchema,
    CreateTournamentRequest, TournamentState, ResultRequest, ApplyResponse
)
from src.web.tournament_manager import TournamentManager
from src.roster.io import PlayerSchema
from src.teams.balancer import balance_teams
from src.tournament.session import TournamentSession

# Create FastAPI app
app = FastAPI(
    title="Roster Balancer",
    description="Balanced team generation and pairwise skill ranking",
    version="1.0.0"
)

tournament_manager = TournamentManager()


def _get_session(tournament_id: str) -> TournamentSession:
    session = tournament_manager.get_session(tournament_id)
    if not session:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return session


def _state(tournament_id: str, session: TournamentSession) -> TournamentState:
    return TournamentState(**tournament_manager.get_state(tournament_id, session))


# =============================================================================
# Teams
# =============================================================================

@app.post("/api/teams", response_model=BalanceResponse)
async def generate_teams(request: BalanceRequest):
    """Split the given (already filtered) players into two teams."""
    players = [p.to_player() for p in request.players]
    rng = random.Random(request.seed) if request.seed is not None else None
    team_set = balance_teams(players, request.label_a, request.label_b, rng=rng)

    return BalanceResponse(teams=[
        TeamSchema(
            label=team.label,
            forwards=[PlayerSchema.from_player(p) for p in team.forwards],
            defensemen=[PlayerSchema.from_player(p) for p in team.defensemen],
            avg_skill=team.average_skill
        )
        for team in team_set
    ])


# =============================================================================
# Tournaments
# =============================================================================

@app.post("/api/tournaments", response_model=TournamentState)
async def create_tournament(request: CreateTournamentRequest):
    """Start a ranking tournament over a roster."""
    players = [p.to_player() for p in request.players]
    try:
        tournament_id = tournament_manager.create_tournament(players, seed=request.seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _state(tournament_id, tournament_manager.get_session(tournament_id))


@app.get("/api/tournaments")
async def list_tournaments():
    """List all active tournaments."""
    return {"tournaments": tournament_manager.list_active_tournaments()}


@app.get("/api/tournaments/{tournament_id}", response_model=TournamentState)
async def get_tournament(tournament_id: str):
    """Get current tournament state."""
    return _state(tournament_id, _get_session(tournament_id))


@app.post("/api/tournaments/{tournament_id}/results", response_model=TournamentState)
async def record_result(tournament_id: str, result: ResultRequest):
    """Record the winner of the current matchup."""
    session = _get_session(tournament_id)
    try:
        tournament_manager.record_result(session, result.winner_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _state(tournament_id, session)


@app.post("/api/tournaments/{tournament_id}/finish", response_model=TournamentState)
async def finish_tournament(tournament_id: str):
    """Compute rankings from the results recorded so far."""
    session = _get_session(tournament_id)
    try:
        session.finish()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _state(tournament_id, session)


@app.post("/api/tournaments/{tournament_id}/reset", response_model=TournamentState)
async def reset_tournament(tournament_id: str):
    """Discard all results and start over with new matchups."""
    _get_session(tournament_id)
    session = tournament_manager.restart(tournament_id)
    return _state(tournament_id, session)


@app.post("/api/tournaments/{tournament_id}/apply", response_model=ApplyResponse)
async def apply_tournament(tournament_id: str):
    """Return the roster with tournament scores as skills and close the tournament."""
    _get_session(tournament_id)
    try:
        players = tournament_manager.apply(tournament_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ApplyResponse(players=[PlayerSchema.from_player(p) for p in players])


@app.delete("/api/tournaments/{tournament_id}")
async def end_tournament(tournament_id: str):
    """End a tournament without applying it."""
    _get_session(tournament_id)
    tournament_manager.end_tournament(tournament_id)
    return {"status": "ended"}
