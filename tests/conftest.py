"""
Pytest configuration and shared fixtures for the test suite.

This file provides sample combat log content and a line builder used
across all test modules.
"""

import pytest
from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


def build_line(
    timestamp: str,
    amount="100",
    player: str = "PlayerA",
    event_type: str = "DamageDone",
    target: str = "Mannequin d'entrainement",
) -> str:
    """Build a combat log line in the client's export layout."""
    return ",".join(
        [timestamp, event_type, "Skill", "1001", str(amount), "0", "0", "0", player, target]
    )


@pytest.fixture
def make_line():
    """Factory for combat log lines."""
    return build_line


@pytest.fixture
def basic_log():
    """PlayerA hits twice ten seconds apart, PlayerB hits once."""
    return "\n".join(
        [
            "CombatLogVersion,4,ADVANCED_LOG_ENABLED,1",
            build_line("20250101-10:00:00:000", 100, "PlayerA"),
            build_line("20250101-10:00:00:000", 50, "PlayerB"),
            build_line("20250101-10:00:10:000", 100, "PlayerA"),
        ]
    )


@pytest.fixture
def raid_log():
    """A longer log with several players, noise lines and Windows line endings."""
    lines = [
        "CombatLogVersion,4,ADVANCED_LOG_ENABLED,1",
        build_line("20250301-21:00:00:000", 1200, "Aldric", target="Vulkan"),
        build_line("20250301-21:00:00:250", 800, "Brienne", target="Vulkan"),
        build_line("20250301-21:00:01:000", 400, "Aldric", event_type="HealingDone", target="Vulkan"),
        build_line("20250301-21:00:02:500", 900, "Cassia", target="Vulkan"),
        "20250301-21:00:03:000,DamageDone,Skill,1001,500",
        build_line("20250301-21:00:04:000", "n/a", "Brienne", target="Vulkan"),
        build_line("20250301-21:00:05:000", 1500, "Aldric", target="Vulkan"),
        build_line("20250301-21:00:08:250", 2000, "Brienne", target="Vulkan"),
        build_line("2025031-21:00:09:000", 9999, "Cassia", target="Vulkan"),
        build_line("20250301-21:00:10:000", 700, "Cassia", target="Vulkan"),
        build_line("20250301-21:00:10:000", 300, "Aldric", target="Vulkan"),
        "",
    ]
    return "\r\n".join(lines)


@pytest.fixture
def log_file(tmp_path, basic_log):
    """The basic log written to disk."""
    path = tmp_path / "CombatLog.txt"
    path.write_text(basic_log, encoding="utf-8")
    return path
