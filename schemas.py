"""
Pydantic request / response schemas
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from models import DrawSession


class PlayerAdd(BaseModel):
    name: str = Field(..., max_length=100)


class DoubleResponse(BaseModel):
    number: int  # 1 起算的隊伍編號
    players: List[str] = Field(..., min_length=2, max_length=2)


class SessionResponse(BaseModel):
    session_id: str
    players: List[str]
    error: Optional[str] = None
    doubles: List[DoubleResponse] = []

    @classmethod
    def from_session(cls, session: DrawSession) -> "SessionResponse":
        return cls(
            session_id=session.id,
            players=list(session.roster.names),
            error=session.error,
            doubles=[
                DoubleResponse(number=i, players=list(pair))
                for i, pair in enumerate(session.visible_doubles, start=1)
            ]
        )


class HealthResponse(BaseModel):
    status: str
    sessions: int
