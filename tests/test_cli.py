from mazespinner.__main__ import main


def test_rectangular_maze_is_printed(capsys):
    assert main(["--width", "4", "--height", "3", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Maze 4x3 (backtracker):" in out
    assert "Perfect: True" in out
    assert out.count("+---") >= 4


def test_circular_summary_is_printed(capsys):
    assert main(["--topology", "circular", "--rings", "3", "--sectors", "12", "--algorithm", "prim",
                 "--seed", "2"]) == 0

    out = capsys.readouterr().out
    assert "ring 0: 6 sectors" in out
    assert "ring 2: 12 sectors" in out
    assert "Cells: 26" in out


def test_compare_lists_every_algorithm(capsys):
    assert main(["--compare", "2", "--width", "6", "--height", "6"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split()[0] for line in lines] == ["backtracker", "kruskal", "prim", "binarytree"]


def test_compare_skips_binary_tree_for_circular(capsys):
    assert main(["--compare", "1", "--topology", "circular"]) == 0

    out = capsys.readouterr().out
    assert "binarytree" not in out
    assert "kruskal" in out


def test_invalid_dimensions_exit_with_error(capsys):
    assert main(["--width", "0"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
