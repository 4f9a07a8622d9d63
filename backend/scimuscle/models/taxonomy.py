"""Muscle taxonomy: the fixed scientific muscles and their display groups."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ScientificMuscle(str, Enum):
    """The 26 individual muscles tracked by the system."""

    # Back
    LATISSIMUS_DORSI = "Latissimus Dorsi"
    MIDDLE_TRAPEZIUS = "Middle Trapezius"
    UPPER_TRAPEZIUS = "Upper Trapezius"
    LOWER_TRAPEZIUS = "Lower Trapezius"
    ERECTOR_SPINAE = "Erector Spinae"
    # Shoulders
    POSTERIOR_DELTOID = "Posterior Deltoid"
    ANTERIOR_DELTOID = "Anterior Deltoid"
    LATERAL_DELTOID = "Lateral Deltoid"
    # Arms
    BICEPS_BRACHII = "Biceps Brachii"
    TRICEPS_LATERAL_MEDIAL = "Triceps (Lateral/Medial)"
    TRICEPS_LONG_HEAD = "Triceps (Long Head)"
    # Legs
    QUADRICEPS_VASTI = "Quadriceps (Vasti)"
    QUADRICEPS_RF = "Quadriceps (RF)"
    GLUTEUS_MAXIMUS = "Gluteus Maximus"
    GLUTEUS_MEDIUS = "Gluteus Medius"
    HAMSTRINGS = "Hamstrings"
    ADDUCTORS = "Adductors"
    GASTROCNEMIUS = "Gastrocnemius"
    SOLEUS = "Soleus"
    # Chest
    PECTORALIS_MAJOR_STERNAL = "Pectoralis Major (Sternal)"
    PECTORALIS_MAJOR_CLAVICULAR = "Pectoralis Major (Clavicular)"
    # Core
    RECTUS_ABDOMINIS = "Rectus Abdominis"
    OBLIQUES = "Obliques"
    HIP_FLEXORS = "Hip Flexors"
    # Forearms
    FOREARM_FLEXORS = "Forearm Flexors"
    FOREARM_EXTENSORS = "Forearm Extensors"


class FunctionalGroup(str, Enum):
    """Coarser display groups shown on the dashboard."""

    CHEST = "Chest"
    UPPER_CHEST = "Upper Chest"
    LATS = "Lats"
    TRAPS = "Traps"
    LOWER_BACK = "Lower Back"
    FRONT_DELTS = "Front Delts"
    SIDE_DELTS = "Side Delts"
    REAR_DELTS = "Rear Delts"
    TRICEPS = "Triceps"
    BICEPS = "Biceps"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    CORE = "Core"
    FOREARMS = "Forearms"
    ADDUCTORS = "Adductors"


SCIENTIFIC_MUSCLES: tuple[ScientificMuscle, ...] = tuple(ScientificMuscle)
FUNCTIONAL_GROUPS: tuple[FunctionalGroup, ...] = tuple(FunctionalGroup)

_M = ScientificMuscle
_G = FunctionalGroup

DEFAULT_SCIENTIFIC_TO_FUNCTIONAL: Mapping[ScientificMuscle, FunctionalGroup] = MappingProxyType(
    {
        _M.LATISSIMUS_DORSI: _G.LATS,
        _M.MIDDLE_TRAPEZIUS: _G.TRAPS,
        _M.UPPER_TRAPEZIUS: _G.TRAPS,
        _M.LOWER_TRAPEZIUS: _G.TRAPS,
        _M.ERECTOR_SPINAE: _G.LOWER_BACK,
        _M.POSTERIOR_DELTOID: _G.REAR_DELTS,
        _M.ANTERIOR_DELTOID: _G.FRONT_DELTS,
        _M.LATERAL_DELTOID: _G.SIDE_DELTS,
        _M.BICEPS_BRACHII: _G.BICEPS,
        _M.TRICEPS_LATERAL_MEDIAL: _G.TRICEPS,
        _M.TRICEPS_LONG_HEAD: _G.TRICEPS,
        _M.QUADRICEPS_VASTI: _G.QUADS,
        _M.QUADRICEPS_RF: _G.QUADS,
        _M.GLUTEUS_MAXIMUS: _G.GLUTES,
        _M.GLUTEUS_MEDIUS: _G.GLUTES,
        _M.HAMSTRINGS: _G.HAMSTRINGS,
        _M.ADDUCTORS: _G.ADDUCTORS,
        _M.GASTROCNEMIUS: _G.CALVES,
        _M.SOLEUS: _G.CALVES,
        _M.PECTORALIS_MAJOR_STERNAL: _G.CHEST,
        _M.PECTORALIS_MAJOR_CLAVICULAR: _G.UPPER_CHEST,
        _M.RECTUS_ABDOMINIS: _G.CORE,
        _M.OBLIQUES: _G.CORE,
        _M.HIP_FLEXORS: _G.CORE,
        _M.FOREARM_FLEXORS: _G.FOREARMS,
        _M.FOREARM_EXTENSORS: _G.FOREARMS,
    }
)

# Body-region listing used by muscle editors; every muscle appears once.
UI_MUSCLE_GROUPS: tuple[tuple[str, tuple[ScientificMuscle, ...]], ...] = (
    (
        "Back",
        (
            _M.LATISSIMUS_DORSI,
            _M.UPPER_TRAPEZIUS,
            _M.MIDDLE_TRAPEZIUS,
            _M.LOWER_TRAPEZIUS,
            _M.ERECTOR_SPINAE,
        ),
    ),
    ("Chest", (_M.PECTORALIS_MAJOR_STERNAL, _M.PECTORALIS_MAJOR_CLAVICULAR)),
    ("Shoulders", (_M.ANTERIOR_DELTOID, _M.LATERAL_DELTOID, _M.POSTERIOR_DELTOID)),
    (
        "Arms",
        (
            _M.BICEPS_BRACHII,
            _M.TRICEPS_LONG_HEAD,
            _M.TRICEPS_LATERAL_MEDIAL,
            _M.FOREARM_FLEXORS,
            _M.FOREARM_EXTENSORS,
        ),
    ),
    (
        "Legs",
        (
            _M.QUADRICEPS_VASTI,
            _M.QUADRICEPS_RF,
            _M.GLUTEUS_MAXIMUS,
            _M.GLUTEUS_MEDIUS,
            _M.HAMSTRINGS,
            _M.ADDUCTORS,
            _M.GASTROCNEMIUS,
            _M.SOLEUS,
        ),
    ),
    ("Core", (_M.RECTUS_ABDOMINIS, _M.OBLIQUES, _M.HIP_FLEXORS)),
)


def parse_muscle(value: str | ScientificMuscle) -> ScientificMuscle:
    """Return the :class:`ScientificMuscle` whose display name is ``value``.

    :raises ValueError: When ``value`` names no tracked muscle.
    """
    return ScientificMuscle(value)


def coerce_muscle(value: str) -> ScientificMuscle | str:
    """Return the matching member, or ``value`` itself when no muscle has that name."""
    try:
        return ScientificMuscle(value)
    except ValueError:
        return value


def parse_group(value: str | FunctionalGroup) -> FunctionalGroup:
    """Return the :class:`FunctionalGroup` whose display name is ``value``."""
    return FunctionalGroup(value)


__all__ = [
    "ScientificMuscle",
    "FunctionalGroup",
    "SCIENTIFIC_MUSCLES",
    "FUNCTIONAL_GROUPS",
    "DEFAULT_SCIENTIFIC_TO_FUNCTIONAL",
    "UI_MUSCLE_GROUPS",
    "parse_muscle",
    "coerce_muscle",
    "parse_group",
]
