"""
Tests for answer formatting.

Run with: pytest tests/test_synthesizer.py -v
"""

from datetime import date

from nba_query.api.models import GameList, GameRow, StatLine
from nba_query.nlq.synthesizer import (
    fmt_number,
    fmt_pct,
    format_games_table,
    format_no_games,
    format_summary,
)


def test_missing_values_render_as_dash():
    assert fmt_number(None) == "-"
    assert fmt_pct(None) == "-"
    assert fmt_number(27.04) == "27.0"
    assert fmt_number(27.0, 0) == "27"
    assert fmt_pct(45.67) == "45.7%"


def test_no_games_sentence():
    assert format_no_games("LeBron James", "vs NYK (career)") == (
        "No games found for LeBron James vs NYK (career)."
    )
    assert format_no_games("LeBron James", "") == "No games found for LeBron James."
    assert format_summary("LeBron James", "", StatLine()) == "No games found for LeBron James."


def test_single_stat_line():
    stats = StatLine(games=4, fg_pct=47.0, ppg=29.0)
    assert format_summary("LeBron James", "(career) playoffs", stats, "fg_pct") == (
        "LeBron James (career) playoffs (4 games): FG% 47.0%"
    )
    assert format_summary("LeBron James", "", stats, "ppg") == "LeBron James (4 games): PPG 29.0"


def test_single_stat_missing_value():
    stats = StatLine(games=2, fg3_pct=None)
    assert format_summary("Ben Simmons", "", stats, "fg3_pct") == "Ben Simmons (2 games): 3P% -"


def test_multi_stat_block():
    stats = StatLine(
        games=5, ppg=30.0, rpg=5.0, apg=6.0, spg=1.0, bpg=0.0, tov=3.0,
        fg_pct=50.0, fg3_pct=40.0, ft_pct=None,
        fgm=10.0, fga=20.0, fg3m=4.0, fg3a=10.0, ftm=5.0, fta=6.0,
    )
    lines = format_summary("Stephen Curry", "vs BOS", stats).split("\n")

    assert lines == [
        "Stephen Curry vs BOS (5 games):",
        "PPG 30.0 | APG 6.0 | RPG 5.0 | SPG 1.0 | BPG 0.0 | TOV 3.0",
        "FG% 50.0% | 3P% 40.0% | FT% -",
        "FGM/FGA 10.0/20.0, 3PM/3PA 4.0/10.0, FTM/FTA 5.0/6.0",
    ]


def test_games_table():
    games = GameList(
        player="Stephen Curry",
        rows=[
            GameRow(game_date=date(2024, 3, 10), opponent_abbr="BOS", team_abbr="GSW",
                    min=34.0, pts=30, fg_pct=50.0, fg3_pct=None),
            GameRow(game_date=date(2023, 11, 20), opponent_abbr="BOS", team_abbr="GSW",
                    min="33:12", pts=20),
        ],
    )
    text = format_games_table(games)
    lines = text.split("\n")

    assert lines[0] == "### Stephen Curry (2 games)"
    assert lines[2].startswith("| Date")
    assert "2024-03-10" in lines[4]
    assert "33:12" in lines[5]
    cells = [cell.strip() for cell in lines[4].strip("|").split("|")]
    assert cells[0] == "2024-03-10"
    assert "-" in cells


def test_games_table_career_and_empty():
    career = GameList(
        player="LeBron James",
        rows=[GameRow(game_date=date(2016, 6, 19), pts=27)],
        career=True,
    )
    assert format_games_table(career).startswith("### LeBron James (career)")
    assert format_games_table(GameList(player="LeBron James")) == "No games found for LeBron James."
