"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main


class TestCLI:

    def test_demo_prints_every_zone(self, capsys):
        """Demo plays the sample deck and lists all eight zones."""
        main(["demo", "--seed", "3", "--draws", "4"])

        out = capsys.readouterr().out
        for zone in ("material_deck", "main_deck", "hand", "battle_zone", "memory"):
            assert zone in out
        assert "(rested)" in out

    def test_demo_is_reproducible(self, capsys):
        """Same seed, same table."""
        main(["demo", "--seed", "8"])
        first = capsys.readouterr().out.split("\n", 1)[1]
        main(["demo", "--seed", "8"])
        second = capsys.readouterr().out.split("\n", 1)[1]

        assert first == second

    def test_no_command_exits(self, capsys):
        with pytest.raises(SystemExit):
            main([])
