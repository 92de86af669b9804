"""Tests for the command-line driver."""

import pytest

from cli import InvalidActionError, describe, main, parse_actions, play_round


class TestParseActions:
    def test_letters(self):
        assert parse_actions("hhs") == ["hit", "hit", "stand"]

    def test_separators_and_case(self):
        assert parse_actions("H, s") == ["hit", "stand"]

    def test_unknown_action(self):
        with pytest.raises(InvalidActionError):
            parse_actions("hx")


class TestPlayRound:
    """Tests for driving a round to completion."""

    def test_scripted_round(self, stacked):
        game = stacked("10S", "6D", "9H", "KC", "QD")
        lines = []
        status = play_round(game, ["stand"], write=lines.append)

        assert status == "Win"
        assert lines[0] == "Dealer: 6 diamonds (6)\nPlayer: 10 spades | 9 hearts (19)"
        assert lines[-1] == "Result: Win"
        assert "> stand" in lines

    def test_script_runs_out_stands(self, stacked):
        game = stacked("10S", "10D", "2H", "8C", "3D")
        lines = []
        play_round(game, ["hit"], write=lines.append)

        assert game.is_complete
        assert lines.count("> stand") == 1
        assert game.player_points() == 15

    def test_interactive_round(self, stacked):
        game = stacked("10S", "10D", "2H", "8C", "3D")
        answers = iter(["x", "hit", "s"])
        prompts = []

        def read(prompt):
            prompts.append(prompt)
            return next(answers)

        status = play_round(game, read=read, write=lambda line: None)

        assert len(prompts) == 3
        assert len(game.player) == 3
        assert status == "Bust"

    def test_end_of_input_stands(self, stacked):
        game = stacked("10S", "10D", "2H", "8C", "3D")

        def read(prompt):
            raise EOFError

        status = play_round(game, read=read, write=lambda line: None)

        assert len(game.player) == 2
        assert game.dealer.reveal
        assert status == "Bust"

    def test_natural_needs_no_actions(self, stacked):
        game = stacked("AS", "9D", "KH", "8C")
        lines = []
        play_round(game, read=lambda prompt: pytest.fail("prompted"), write=lines.append)
        assert lines[-1] == "Result: Win"

    def test_describe_hides_hole_card(self, stacked):
        game = stacked("10S", "9D", "6H", "KC")
        assert describe(game) == "Dealer: 9 diamonds (9)\nPlayer: 10 spades | 6 hearts (16)"


class TestMain:
    """Tests for the console entry point."""

    def test_seeded_run(self, capsys):
        assert main(["--seed", "42", "--actions", "s"]) == 0
        out = capsys.readouterr().out
        assert "Result: " in out

    def test_seeded_runs_repeat(self, capsys):
        main(["--seed", "11", "--actions", "s"])
        first = capsys.readouterr().out
        main(["--seed", "11", "--actions", "s"])
        assert capsys.readouterr().out == first

    def test_json_output(self, capsys):
        assert main(["--seed", "42", "--actions", "s", "--json"]) == 0
        out = capsys.readouterr().out
        assert '"status"' in out
        assert '"ROUND_COMPLETE"' in out

    def test_bad_action_exits_with_error(self):
        assert main(["--actions", "q"]) == 2

    def test_log_level_case_insensitive(self, capsys):
        assert main(["--seed", "42", "--actions", "s", "--log-level", "info"]) == 0

    def test_bad_log_level_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "bogus", "--actions", "s"])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_bad_dealer_rule_exits_with_error(self):
        assert main(["--dealer-stands-on", "30", "--actions", "s"]) == 2
