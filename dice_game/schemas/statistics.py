from pydantic import BaseModel


class PlayerRate(BaseModel):
    nickname: str
    successRate: str


class PlayersResponse(BaseModel):
    message: str
    data: list[PlayerRate]


class RankedPlayer(PlayerRate):
    gamesPlayed: int


class Ranking(BaseModel):
    players: list[RankedPlayer]
    averageSuccessRate: str


class RankingResponse(BaseModel):
    message: str
    data: Ranking


class ExtremePlayerResponse(BaseModel):
    message: str
    data: RankedPlayer
