import main


def test_parse_values_skips_bad_entries(capsys):
    assert main.parse_values("1, x ,3,,") == [1, 3]
    assert "[config] Skipping non-integer value: 'x'" in capsys.readouterr().out


def test_parse_seed_falls_back_to_zero(capsys):
    assert main.parse_seed("42") == 42
    assert main.parse_seed("abc") == 0
    assert "[config]" in capsys.readouterr().out


def test_smoke_test_output(monkeypatch, capsys):
    monkeypatch.setattr(main, "DEMO_VALUES", "5,3,8,1,4,7,9")
    main.run_smoke_test()
    out = capsys.readouterr().out
    assert "in-order:       [1, 3, 4, 5, 7, 8, 9]" in out
    assert "remove(5) -> Node(7)" in out
    assert "find(5) after remove -> None" in out


def test_smoke_test_without_values(monkeypatch, capsys):
    monkeypatch.setattr(main, "DEMO_VALUES", "")
    main.run_smoke_test()
    assert "No values to insert." in capsys.readouterr().out
