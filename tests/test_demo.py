from fuzzytrie.demo import Product, main


def test_main_prints_exact_match_first(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Exact: 1 999"


def test_main_finds_iphone_fuzzily(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert "~ iPhone → {ID:1 Price:999}" in lines[1:]


def test_main_fuzzy_lines_are_prefixed(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) >= 2
    assert all(line.startswith("~ ") for line in lines[1:])


def test_product_str_keeps_fraction():
    assert str(Product(id=3, price=12.5)) == "{ID:3 Price:12.5}"


def test_product_equality():
    assert Product(id=1, price=999) == Product(id=1, price=999.0)