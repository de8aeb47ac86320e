"""
Game data mappings and configurations.

This module contains the configurable list of known damage targets (raid
bosses and the training dummy) and the aliases used to recognise them in
combat log target names.
"""

from typing import Dict, List


# Known targets, in the order they are checked
TARGET_NAMES: List[str] = [
    "Mannequin",
    "Dragaryles",
    "Vulkan",
    "Zairos",
    "Calanthia",
    "Umbrakan",
    "Verence",
    "Martha",
    "Tête de lion",
]

# Aliases matched against normalised target names
TARGET_ALIASES: Dict[str, List[str]] = {
    "Mannequin": [
        "mannequin",
        "mannequin d'entrainement",
        "mannequin d'entraînement",
        "dummy",
        "training dummy",
        "entrainement",
        "entraînement",
    ],
    "Dragaryles": ["dragaryles"],
    "Vulkan": ["vulkan"],
    "Zairos": ["zairos"],
    "Calanthia": ["calanthia"],
    "Umbrakan": ["umbrakan"],
    "Verence": ["verence"],
    "Martha": ["martha"],
    "Tête de lion": ["tete de lion", "tête de lion"],
}


def get_target_names() -> List[str]:
    """Get known target names in detection order."""
    return list(TARGET_NAMES)


def get_target_aliases(target: str) -> List[str]:
    """Get the aliases for a target (empty if the target is unknown)."""
    return list(TARGET_ALIASES.get(target, []))


def is_known_target(target: str) -> bool:
    return target in TARGET_NAMES


def add_target(target: str, aliases: List[str]) -> None:
    """Register a target, or extend an existing target's aliases."""
    if target not in TARGET_NAMES:
        TARGET_NAMES.append(target)

    existing = TARGET_ALIASES.setdefault(target, [])
    for alias in aliases:
        if alias not in existing:
            existing.append(alias)
