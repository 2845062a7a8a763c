"""Tests for the adjgraph command line."""
from __future__ import annotations

import pytest

from adjgraph.cli import main


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, str, str]:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    out, err = capsys.readouterr()
    return exc_info.value.code, out, err


class TestCli:
    def test_no_command_prints_help(self, capsys) -> None:
        code, out, _ = _run([], capsys)
        assert code == 0
        assert "usage: adjgraph" in out

    def test_print_undirected(self, capsys) -> None:
        code, out, _ = _run(["print", "-e", "A", "B"], capsys)
        assert code == 0
        assert out == "Vertex A -> B\nVertex B -> A\n"

    def test_print_weighted(self, capsys) -> None:
        code, out, _ = _run(
            ["print", "--kind", "weighted", "-e", "A", "B", "2.5", "-e", "B", "C"],
            capsys,
        )
        assert code == 0
        assert out.splitlines() == [
            "Vertex A -> B(weight: 2.5)",
            "Vertex B -> C(weight: 1.0)",
            "Vertex C -> ",
        ]

    def test_bfs_and_dfs(self, capsys) -> None:
        edges = ["-e", "A", "B", "-e", "A", "C", "-e", "B", "D"]
        _, out, _ = _run(["bfs", "A", *edges], capsys)
        assert out == "A B C D\n"
        _, out, _ = _run(["dfs", "A", *edges], capsys)
        assert out == "A B D C\n"

    def test_bfs_absent_source(self, capsys) -> None:
        code, out, _ = _run(["bfs", "Z", "-e", "A", "B"], capsys)
        assert code == 0
        assert out == "\n"

    def test_shortest_path(self, capsys) -> None:
        code, out, _ = _run(
            ["shortest-path", "A", "-e", "A", "B", "-e", "B", "C", "--vertex", "W"],
            capsys,
        )
        assert code == 0
        assert out.splitlines() == ["W inf", "A 0", "B 1", "C 2"]

    def test_toposort(self, capsys) -> None:
        code, out, _ = _run(
            ["toposort", "--kind", "directed", "-e", "shirt", "tie", "-e", "tie", "jacket"],
            capsys,
        )
        assert code == 0
        assert out == "shirt tie jacket\n"

    def test_has_cycle(self, capsys) -> None:
        code, out, _ = _run(
            ["has-cycle", "--kind", "directed", "-e", "A", "B", "-e", "B", "A"],
            capsys,
        )
        assert code == 1
        assert out == "cycle: A -> B -> A\n"

    def test_no_cycle(self, capsys) -> None:
        code, out, _ = _run(["has-cycle", "--kind", "directed", "-e", "A", "B"], capsys)
        assert code == 0
        assert out == "no cycle\n"

    def test_in_degree(self, capsys) -> None:
        code, out, _ = _run(
            ["in-degree", "C", "--kind", "weighted", "-e", "A", "C", "-e", "B", "C", "4"],
            capsys,
        )
        assert code == 0
        assert out == "2\n"

    def test_directed_only_command_rejects_undirected(self, capsys) -> None:
        code, _, err = _run(["toposort", "-e", "A", "B"], capsys)
        assert code == 2
        assert "--kind directed" in err

    def test_weight_on_plain_graph_rejected(self, capsys) -> None:
        code, _, err = _run(["print", "-e", "A", "B", "3"], capsys)
        assert code == 2
        assert "SRC DST" in err

    def test_bad_weight_rejected(self, capsys) -> None:
        code, _, err = _run(["print", "--kind", "weighted", "-e", "A", "B", "heavy"], capsys)
        assert code == 2
        assert "invalid weight" in err
