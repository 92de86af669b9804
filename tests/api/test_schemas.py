"""Tests for round state schemas."""

import json

from api.schemas import CardResponse, RoundStateResponse
from core.cards import Card


class TestSchemas:
    """Tests for the pydantic snapshot models."""

    def test_card_response(self):
        card = CardResponse.from_card(Card.from_string("AH"))
        assert card.rank == "A"
        assert card.suit == "hearts"
        assert card.value == 11

    def test_snapshot_hides_hole_card(self, stacked):
        game = stacked("10S", "9D", "6H", "KC")
        snapshot = RoundStateResponse.from_round(game)

        assert snapshot.state == "PLAYER_TURN"
        assert snapshot.status == ""
        assert snapshot.outcome is None
        assert snapshot.player.points == 16
        assert len(snapshot.player.cards) == 2
        assert snapshot.dealer.revealed is False
        assert snapshot.dealer.points == 9
        assert [c.rank for c in snapshot.dealer.cards] == ["9"]
        assert snapshot.cards_remaining == 48

    def test_snapshot_after_stand(self, stacked):
        game = stacked("10S", "10D", "7H", "9C")
        game.stand()
        snapshot = RoundStateResponse.from_round(game)

        assert snapshot.state == "ROUND_COMPLETE"
        assert snapshot.status == "Bust"
        assert snapshot.outcome == "DEALER_WIN"
        assert snapshot.dealer.display == "10 diamonds | 9 clubs"

    def test_snapshot_json(self, stacked):
        game = stacked("AS", "9D", "KH", "8C")
        data = json.loads(RoundStateResponse.from_round(game).model_dump_json())
        assert data["status"] == "Win"
        assert data["player"]["points"] == 21
        assert data["dealer"]["revealed"] is True
