import os
import runpy

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

import main
from main import parse_terms, preview_table, plot_sequence, print_details
from sequence import Sequence


class TestParseTerms:

    def test_simple(self):
        assert parse_terms("1, 4, 9, 16") == [1.0, 4.0, 9.0, 16.0]

    def test_blanks_are_skipped(self):
        assert parse_terms(" 2 ,, 4 , ") == [2.0, 4.0]

    def test_empty(self):
        assert parse_terms("") == []
        with pytest.raises(ValueError, match="at least one term required"):
            Sequence(*parse_terms(""))

    def test_invalid_token(self):
        with pytest.raises(ValueError, match="abc"):
            parse_terms("1, abc, 3")

    def test_floats_and_negatives(self):
        assert parse_terms("-1.5, 2e3") == [-1.5, 2000.0]


def test_preview_table():
    rows = preview_table(Sequence(1, 4, 9, 16))
    assert [n for n, _ in rows] == list(range(1, 11))
    assert [v for _, v in rows] == pytest.approx([n * n for n in range(1, 11)])


def test_preview_table_count():
    assert len(preview_table(Sequence(2, 4), count=3)) == 3


def test_plot_sequence(monkeypatch):
    monkeypatch.setattr(plt, "show", lambda: None)
    plot_sequence(Sequence(1, 4, 9, 16), count=6)
    ax = plt.gca()
    assert len(ax.lines) == 1
    assert len(ax.collections) == 1
    plt.close("all")


def test_print_details(capsys):
    print_details(Sequence(1, 4, 9), count=4)
    out = capsys.readouterr().out
    assert "(9 - 7)(n-1)(n-2)/2!" in out
    assert "Coefficients : c0 = 1, c1 = 7" in out
    assert "  4 | 16" in out


def test_default_preview():
    assert main.DEFAULT_PREVIEW == 10


MAIN_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "main.py")


class TestMenu:
    """Runs main.py as a script with scripted answers to input()."""

    def run_menu(self, monkeypatch, *answers):
        replies = iter(answers)
        shown = []
        monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
        monkeypatch.setattr(plt, "show", lambda: shown.append(True))
        runpy.run_path(MAIN_PATH, run_name="__main__")
        plt.close("all")
        return shown

    def test_choice_1_prints_details(self, monkeypatch, capsys):
        shown = self.run_menu(monkeypatch, "1", "1, 4, 9")
        out = capsys.readouterr().out
        assert "Formule : " + Sequence(1, 4, 9).to_formula() in out
        assert r"\frac{\displaystyle\prod_{k=1}^{2} (n - k)}{2!}" in out
        assert " 10 | 100" in out
        assert shown == []

    def test_choice_2_also_plots(self, monkeypatch, capsys):
        shown = self.run_menu(monkeypatch, "2", "2, 4, 6")
        assert "(6 - 6)(n-1)(n-2)/2!" in capsys.readouterr().out
        assert shown == [True]

    def test_invalid_choice(self, monkeypatch, capsys):
        self.run_menu(monkeypatch, "3")
        assert "⚠️ Choix non valide" in capsys.readouterr().out

    def test_invalid_term_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            self.run_menu(monkeypatch, "1", "1, abc")
        assert exc.value.code == 1
        assert "⚠️ Erreur : terme invalide : 'abc'" in capsys.readouterr().out

    def test_no_terms_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            self.run_menu(monkeypatch, "1", "  ")
        assert exc.value.code == 1
        assert "at least one term required" in capsys.readouterr().out
