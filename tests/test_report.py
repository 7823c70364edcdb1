import pytest

from pushswap.complexity.options import ProgramOptions, ProgramParameters
from pushswap.complexity.report import (
    Language,
    end_line,
    get_help,
    get_usage,
    get_version,
    start_line,
    status_lines,
)


def test_version():
    assert get_version() == "Complexity 1.7.1 (2024-11-12)"


def test_usage():
    assert get_usage().startswith("usage: ./complexity [-vh]")
    assert get_usage().endswith("numbers iterations [goal] [checker]")


def test_help_languages():
    english = get_help(Language.EN_GB)
    french = get_help(Language.FR_FR)
    assert "starting benchmark for push_swap" in english
    assert "lance un benchmark de votre push_swap" in french
    assert english.endswith("Only pass sorted numbers to program.\n")
    assert french.endswith("Envoie uniquement des nombres triés au programme.\n")


def test_start_line_with_seed():
    line = start_line(ProgramOptions(seed=42), ProgramParameters(numbers=100, iterations=5), Language.EN_GB)
    assert line.startswith("\033[97mStarting the test : \033[95m100")
    assert line.endswith(" (seed 42)")


def test_start_line_without_seed():
    line = start_line(ProgramOptions(), ProgramParameters(numbers=3, iterations=2), Language.FR_FR)
    assert "seed" not in line
    assert "Démarrage du test" in line


@pytest.mark.parametrize("language", list(Language))
def test_status_has_seven_lines(language):
    params = ProgramParameters(numbers=5, iterations=4, objective=10, checker="chk")
    lines = status_lines(params, 2, 8, 1.5, 6, 9, 1, 2, language)
    assert len(lines) == 7


def test_status_french_plain_counts():
    params = ProgramParameters(numbers=5, iterations=4)
    lines = status_lines(params, 1, 7, 0.0, 6, 9, 0, 0, Language.FR_FR)
    assert lines[0] == "Pire = \033[31m9\033[0m instructions"
    assert lines[1] == "Moyenne = \033[33m7\033[0m instructions"
    assert lines[2] == "Meilleur = \033[36m6\033[0m instructions"


def test_status_missing_goal_and_checker():
    params = ProgramParameters(numbers=5, iterations=4)
    lines = status_lines(params, 1, 7, 0.0, 6, 9, 0, 0, Language.FR_FR)
    assert lines[4] == "Objectif = entrez un nombre en troisième argument"
    assert lines[5] == "Précision = entrez un testeur en quatrième argument"


def test_status_reduced_figures():
    params = ProgramParameters(numbers=5, iterations=1)
    lines = status_lines(params, 1, 100, 1.0, 100, 100, 0, 0, Language.EN_GB)
    assert lines[0] == "Pire = \033[31m90.0\033[0m instructions"
    assert lines[3] == "Écart-type = \033[93m0.9\033[0m instructions"
    assert lines[6] == "\033[32m90.0\033[0m % effectué"


def test_status_goal_line_mentions_objective():
    params = ProgramParameters(numbers=5, iterations=2, objective=700)
    lines = status_lines(params, 2, 8, 0.0, 6, 9, 2, 0, Language.EN_GB)
    assert "% sous \033[94m700\033[0m" in lines[4]
    assert lines[4].endswith("au dessus)   ")


def test_end_line():
    assert end_line() == "\033[38m" + get_version() + "\033[0m"