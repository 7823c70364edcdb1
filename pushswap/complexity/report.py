"""Texts printed by the benchmark: version, usage, help and progress."""

from __future__ import annotations

from enum import Enum
from typing import List

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

_B = "\033[1m"
_U = "\033[4m"
_R = "\033[0m"


class Language(Enum):
    """Language of the help and the progress report."""

    EN_GB = "en_GB"
    FR_FR = "fr_FR"


def get_version() -> str:
    """Version string of the benchmark."""
    return "Complexity 1.7.1 (2024-11-12)"


def get_usage() -> str:
    """One-line usage summary."""
    return (
        "usage: ./complexity [-vh] [-s seed] [-f push_swap] [--sorted] "
        "numbers iterations [goal] [checker]"
    )


def _synopsis_args() -> str:
    return (
        f"[{_B}-s{_R} {_U}seed{_R}] [{_B}-o{_R} {_U}file{_R}] [{_B}-f{_R} {_U}file{_R}] "
        f"[{_B}--seed{_R}] {_U}numbers{_R} {_U}iterations{_R} [{_U}goal{_R}] [{_U}checker{_R}]"
    )


def _option_block(entries) -> str:
    parts = []
    for header, text in entries:
        parts.append(f"     {header}\n")
        parts.append(f"             {text}\n")
        parts.append("     \n")
    # The help ends right after the last description line.
    return "".join(parts)[: -len("     \n")]


def _options(texts) -> str:
    headers = [
        f"{_B}-v{_R}, {_B}--version{_R}",
        f"{_B}-h{_R}, {_B}--help{_R}",
        f"{_B}-s{_R} {_U}seed{_R}, {_B}--seed{_R}={_U}seed{_R}",
        f"{_B}-o{_R} {_U}output{_R}, {_B}--output{_R}={_U}output{_R}",
        f"{_B}-f{_R} {_U}push_swap{_R}, {_B}--file{_R}={_U}push_swap{_R}",
        f"{_B}--sorted{_R}",
    ]
    return _option_block(zip(headers, texts))


def get_help(language: Language = Language.FR_FR) -> str:
    """Full manual-style help text."""
    program = f"{_B}./complexity{_R}"
    if language is Language.EN_GB:
        head = (
            f"{_B}NAME{_R}\n"
            f"     {_B}complexity{_R} -- starting benchmark for push_swap\n"
            "\n"
            f"{_B}SYNOPSIS{_R}\n"
            f"     {program} [{_B}-vh{_R}] {_synopsis_args()}\n"
            "\n"
            f"{_B}DESCRIPTION{_R}\n"
            "     push_swap executable will be default searched from current and parent directory.\n"
            "     \n"
            "     Following options are available :\n"
            "     \n"
        )
        texts = [
            "Show version of tester.",
            "Show this help.",
            "Generates the numbers based on the seed.",
            "Specifies an output file for logs.",
            f"Use {_U}push_swap{_R} for push_swap executable.",
            "Only pass sorted numbers to program.",
        ]
    else:
        head = (
            f"{_B}NAME{_R}\n"
            f"     {_B}complexity{_R} -- lance un benchmark de votre push_swap\n"
            "\n"
            f"{_B}SYNOPSIS{_R}\n"
            f"     {program} [{_B}-vh{_R}]\n"
            f"     {program} {_synopsis_args()}\n"
            "\n"
            f"{_B}DESCRIPTION{_R}\n"
            "     L'exécutable push_swap est cherché par défaut dans le répertoire courant et parent.\n"
            "     \n"
            "     Les options suivantes sont disponibles :\n"
            "     \n"
        )
        texts = [
            "Affiche la version du testeur.",
            "Affiche l'aide.",
            "Génère les nombres en fonction de la graine.",
            "Spécifie un fichier de sortie pour les logs.",
            f"Utilise {_U}push_swap{_R} en tant qu'exécutable push_swap.",
            "Envoie uniquement des nombres triés au programme.",
        ]
    return head + _options(texts)


def start_line(options, params, language: Language = Language.FR_FR) -> str:
    """Announcement printed before the first iteration."""
    if language is Language.EN_GB:
        words = ("Starting the test", "elements", "iterations")
    else:
        words = ("Démarrage du test", "éléments", "itérations")
    line = (
        f"\033[97m{words[0]} : \033[95m{params.numbers}\033[97m {words[1]}, "
        f"\033[95m{params.iterations}\033[97m {words[2]}\033[0m"
    )
    if options.seed is not None:
        line += f" (seed {options.seed})"
    return line


def _fixed(value: float) -> str:
    return f"{value:.1f}"


def _reduced(value: float) -> str:
    return _fixed(value - value * 0.1)


def status_lines(
    params,
    done: int,
    mean: int,
    stddev: float,
    best: int,
    worst: int,
    successful: int,
    ok: int,
    language: Language = Language.FR_FR,
) -> List[str]:
    """The seven progress lines shown after each iteration."""
    if language is Language.EN_GB:
        shown = [_reduced(worst), _reduced(mean), _reduced(best)]
    else:
        shown = [str(worst), str(mean), str(best)]
    lines = [
        f"Pire = \033[31m{shown[0]}\033[0m instructions",
        f"Moyenne = \033[33m{shown[1]}\033[0m instructions",
        f"Meilleur = \033[36m{shown[2]}\033[0m instructions",
        f"Écart-type = \033[93m{_reduced(stddev)}\033[0m instructions",
    ]
    if params.objective is not None:
        scale = 100 if language is Language.EN_GB else 90
        rate = successful * scale // done - (successful * 100 // done) * 0.1
        lines.append(
            f"Objectif = \033[94m{_fixed(rate)}\033[0m % sous \033[94m{params.objective}"
            f"\033[0m (\033[91m{_reduced(done - successful)}\033[0m au dessus)   "
        )
    else:
        lines.append("Objectif = entrez un nombre en troisième argument")
    if params.checker is not None:
        lines.append(
            f"Précision = \033[97m{_reduced(ok * 100 // done)}\033[0m % OK "
            f"(\033[91m{_reduced(done - ok)}\033[0m KO)   "
        )
    else:
        lines.append("Précision = entrez un testeur en quatrième argument")
    lines.append(f"\033[32m{_reduced(done * 100 // params.iterations)}\033[0m % effectué")
    return lines


def end_line() -> str:
    """Closing line showing the version."""
    return f"\033[38m{get_version()}\033[0m"