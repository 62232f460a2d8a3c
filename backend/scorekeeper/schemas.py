from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .scoring.common import SetOutcome, Side, TerminationMode

RawScore = Optional[Union[int, str]]


class SetEntryIn(BaseModel):
    """One set as typed by the user. Values are kept raw."""

    player1_games: RawScore = Field(default="", alias="player1Games")
    player2_games: RawScore = Field(default="", alias="player2Games")
    player1_tiebreak: RawScore = Field(default="", alias="player1Tiebreak")
    player2_tiebreak: RawScore = Field(default="", alias="player2Tiebreak")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ExistingSetIn(BaseModel):
    player1_games: int = Field(alias="player1Games", ge=0)
    player2_games: int = Field(alias="player2Games", ge=0)
    player1_tiebreak: Optional[int] = Field(
        default=None, alias="player1TiebreakPoints", ge=0
    )
    player2_tiebreak: Optional[int] = Field(
        default=None, alias="player2TiebreakPoints", ge=0
    )

    model_config = ConfigDict(populate_by_name=True)


class ExistingScoreIn(BaseModel):
    sets: List[ExistingSetIn] = Field(default_factory=list)
    retired_player_id: Optional[str] = Field(default=None, alias="retiredPlayerId")
    walkover_winner_id: Optional[str] = Field(default=None, alias="walkoverWinnerId")

    model_config = ConfigDict(populate_by_name=True)


class MatchIn(BaseModel):
    player1_id: str = Field(..., min_length=1, alias="player1Id")
    player1_name: str = Field(default="", alias="player1Name")
    player2_id: str = Field(..., min_length=1, alias="player2Id")
    player2_name: str = Field(default="", alias="player2Name")
    existing_score: Optional[ExistingScoreIn] = Field(default=None, alias="existingScore")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("player1_id", "player2_id", mode="before")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("player id must be a string")
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("player id must not be empty")
        return trimmed

    @model_validator(mode="after")
    def _distinct_players(self) -> "MatchIn":
        if self.player1_id == self.player2_id:
            raise ValueError("player1Id and player2Id must be different")
        return self


class ScorePreviewIn(BaseModel):
    match: MatchIn
    sport: Optional[str] = None
    rules: Dict[str, Any] = Field(default_factory=dict)
    sets: List[SetEntryIn] = Field(default_factory=list)


class ScoreSubmitIn(ScorePreviewIn):
    termination_mode: Optional[TerminationMode] = Field(
        default=None, alias="terminationMode"
    )
    manual_winner: Optional[Side] = Field(default=None, alias="manualWinner")

    model_config = ConfigDict(populate_by_name=True)


class LivePreviewOut(BaseModel):
    set_outcomes: List[SetOutcome] = Field(alias="setOutcomes")
    sets_to_show: int = Field(alias="setsToShow")
    winner_id: Optional[str] = Field(default=None, alias="winnerId")
    loser_id: Optional[str] = Field(default=None, alias="loserId")
    score_text: str = Field(default="", alias="scoreText")
    advisory: bool = True

    model_config = ConfigDict(populate_by_name=True)


class SetGamesOut(BaseModel):
    player1_games: int = Field(alias="player1Games")
    player2_games: int = Field(alias="player2Games")

    model_config = ConfigDict(populate_by_name=True)


class MatchOutcomeOut(BaseModel):
    match_id: str = Field(alias="matchId")
    winner_id: str = Field(alias="winnerId")
    loser_id: str = Field(alias="loserId")
    winner_name: str = Field(default="", alias="winnerName")
    loser_name: str = Field(default="", alias="loserName")
    score_text: str = Field(alias="scoreText")
    sets: List[SetGamesOut] = Field(default_factory=list)
    termination_mode: TerminationMode = Field(alias="terminationMode")

    model_config = ConfigDict(populate_by_name=True)
