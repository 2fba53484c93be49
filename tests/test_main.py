from datetime import datetime

from src.mazechase.leaderboard import Leaderboard
from src.mazechase.main import format_ranking, main, parse_args


def test_ranking_of_empty_board(tmp_path, capsys):
    main(["--ranking", "--scores", str(tmp_path / "scores.json")])
    assert capsys.readouterr().out.splitlines() == ["[RANK] No scores yet!"]


def test_ranking_lists_rank_name_score_date(tmp_path, capsys):
    path = str(tmp_path / "scores.json")
    board = Leaderboard(path)
    board.submit_score("Ana", 900, when=datetime(2024, 5, 1, 12, 0, 0))
    board.submit_score("Bo", 1500, when=datetime(2024, 5, 2, 12, 0, 0))

    main(["--ranking", "--scores", path])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].split() == ["[RANK]", "Rank", "Name", "Score", "Date"]
    first, second = lines[1].split(), lines[2].split()
    assert first[1:4] == ["1", "Bo", "1500"]
    assert second[1:4] == ["2", "Ana", "900"]
    assert lines[2].endswith(datetime(2024, 5, 1, 12, 0, 0).strftime("%x, %X"))


def test_format_ranking_without_entries():
    assert format_ranking([]) == ["No scores yet!"]


def test_cli_defaults():
    args = parse_args([])
    assert args.level == 1
    assert not args.ranking and not args.mute
