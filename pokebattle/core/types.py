"""Element metadata: colours & abbreviations for commentary output.

Element tags are free-form strings; composite tags use '/' ("Fire/Flying").
Lookups here are case-insensitive, unlike the effectiveness table which
matches tags exactly.
"""
from __future__ import annotations
from typing import Dict, Tuple
import re

from colorama import Fore, Style

ELEMENT_SEPARATOR = "/"

ELEMENT_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "flying": "FLY",
    "steel": "STL",
    "dragon": "DRA",
    "rock": "RCK",
    "ground": "GRN",
    "ice": "ICE",
    "psychic": "PSY",
}

_ELEMENT_FORE: Dict[str, str] = {
    "normal": Fore.WHITE,
    "fire": Fore.RED,
    "water": Fore.CYAN,
    "grass": Fore.GREEN,
    "electric": Fore.YELLOW,
    "flying": Fore.WHITE,
    "steel": Fore.WHITE,
    "dragon": Fore.MAGENTA,
    "rock": Fore.YELLOW,
    "ground": Fore.YELLOW,
    "ice": Fore.CYAN,
    "psychic": Fore.MAGENTA,
}

RESET = Style.RESET_ALL

def split_element(element: str) -> Tuple[str, ...]:
    """'Fire/Flying' -> ('Fire', 'Flying'); blank parts are dropped."""
    return tuple(p.strip() for p in element.split(ELEMENT_SEPARATOR) if p.strip())

def element_abbreviation(element: str) -> str:
    return ELEMENT_ABBREVIATIONS.get(element.lower(), element[:3].upper())

def colorize_element_text(element: str, text: str) -> str:
    code = _ELEMENT_FORE.get(element.lower(), "")
    if not code:
        return text
    return f"{code}{text}{RESET}"

def format_element(element: str) -> str:
    parts = [colorize_element_text(p, element_abbreviation(p)) for p in split_element(element)]
    return ELEMENT_SEPARATOR.join(parts)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    'ELEMENT_ABBREVIATIONS','split_element','element_abbreviation',
    'colorize_element_text','format_element','strip_ansi'
]
