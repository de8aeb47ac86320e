"""
Target detection for combat logs.

Works out which known target (boss or training dummy) a log was recorded
against by looking at the target column of its damage lines.
"""

import re
import unicodedata
from typing import Dict, List, Optional

from ..config import game_data
from ..parser.events import EVENT_TYPE_FIELD, HEADER_TOKEN, TARGET_FIELD, EventType
from ..parser.tokenizer import split_lines

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def normalize_text(value: str) -> str:
    """
    Normalise a name for alias matching.

    Lowercases, strips accents and collapses anything that is not a-z/0-9
    into single spaces: "Mannequin d'Entraînement" -> "mannequin d entrainement".
    """
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = COMBINING_MARKS.sub("", decomposed)
    return NON_ALPHANUMERIC.sub(" ", stripped).strip()


def _target_tokens() -> Dict[str, List[str]]:
    return {
        target: [normalize_text(alias) for alias in game_data.get_target_aliases(target)]
        for target in game_data.get_target_names()
    }


def _find_target(normalized: str, tokens: Dict[str, List[str]]) -> Optional[str]:
    if not normalized:
        return None
    for target, target_tokens in tokens.items():
        if any(token and token in normalized for token in target_tokens):
            return target
    return None


def match_target(target_name: str) -> Optional[str]:
    """
    Match a raw target name against the known targets.

    Args:
        target_name: Target column value from a log line

    Returns:
        The first known target with an alias contained in the name, or None
    """
    return _find_target(normalize_text(target_name), _target_tokens())


def detect_target(content: str) -> Optional[str]:
    """
    Detect the target a combat log was recorded against.

    Scans DamageDone lines in order and returns the known target matched by
    the first line whose target column names one.

    Args:
        content: Full text of a combat log export

    Returns:
        Known target name, or None if no line names a known target
    """
    tokens = _target_tokens()

    for line in split_lines(content):
        if not line or line.startswith(HEADER_TOKEN):
            continue

        fields = line.split(",")
        if len(fields) <= TARGET_FIELD:
            continue

        if fields[EVENT_TYPE_FIELD].strip() != EventType.DAMAGE_DONE.value:
            continue

        target = _find_target(normalize_text(fields[TARGET_FIELD]), tokens)
        if target:
            return target

    return None
