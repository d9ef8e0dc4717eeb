import pytest

from orderbook.demo import main


def test_main_prints_book_and_best_quote(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "=== Order Book ==="
    assert "Best Bid: 25 Qty: 5" in out
    assert "Best Ask: 25.4 Qty: 6" in out


def test_main_book_rows_are_crossed_free(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    rows = lines[1:21]
    assert len(rows) == 20
    assert rows[0].startswith("[ 1] ")
    assert rows[19].startswith("[20] ")
    first_bid = float(rows[0].split("]")[2].split("|")[0])
    first_ask = float(rows[0].split("|")[1].split("[")[0])
    assert first_bid < first_ask


def test_main_writes_nothing_to_stderr(capsys):
    main([])
    assert capsys.readouterr().err == ""


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2