"""
Module: engine.config

Purpose:
    Configuration dataclass for the round engine. Immutable
    configuration with validation on construction.

Key Classes:
    - EngineConfig: Row count, delay durations and seed

Dependencies:
    - dataclasses (std)

Used By:
    - engine.round_engine: RoundEngine
    - gui.app: Command-line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


# Option names accepted by EngineConfig.from_options (camelCase -> field)
_OPTION_ALIASES = {
    "visibleRows": "visible_rows",
    "matchHighlightDelay": "match_highlight_delay",
    "mismatchPenaltyDelay": "mismatch_penalty_delay",
    "disappearDelayRange": "disappear_delay_range",
}


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for a round engine (immutable).

    All delays are in seconds and are handed to the engine's ``sleep``
    coroutine, so tests can run them on a fake clock.

    Attributes:
        visible_rows: Number of rows on the board (N)
        match_highlight_delay: How long the match markers stay on
        mismatch_penalty_delay: How long a mismatched pair stays frozen
        disappear_delay_range: Inclusive integer bounds for the random
            wait between the highlight ending and the pair being removed
        seed: Random seed (None = nondeterministic)

    Invariants:
        - visible_rows >= 1
        - all delays >= 0
        - 0 <= disappear_delay_range[0] <= disappear_delay_range[1]

    Example:
        >>> config = EngineConfig(visible_rows=4, seed=7)
        >>> config.disappear_delays
        range(1, 4)
    """

    visible_rows: int = 5
    match_highlight_delay: float = 0.35
    mismatch_penalty_delay: float = 2.0
    disappear_delay_range: tuple[int, int] = (1, 3)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not _is_int(self.visible_rows):
            raise ValueError(f"visible_rows must be an integer: {self.visible_rows!r}")
        if self.visible_rows < 1:
            raise ValueError(f"visible_rows must be positive: {self.visible_rows}")
        for name in ("match_highlight_delay", "mismatch_penalty_delay"):
            value = getattr(self, name)
            if not _is_number(value):
                raise ValueError(f"{name} must be a number of seconds: {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative: {value}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer or None: {self.seed!r}")

        bounds = self.disappear_delay_range
        if isinstance(bounds, (str, bytes)) or not isinstance(bounds, (tuple, list)) or len(bounds) != 2:
            raise ValueError(f"disappear_delay_range must be (low, high): {bounds!r}")
        low, high = bounds
        # Whole seconds only
        if not (_is_int(low) and _is_int(high)):
            raise ValueError(f"disappear_delay_range bounds must be whole seconds: {bounds!r}")
        if low < 0 or high < low:
            raise ValueError(f"disappear_delay_range must satisfy 0 <= low <= high: {bounds!r}")
        # Lists from JSON/CLI are normalised so the config stays hashable
        object.__setattr__(self, "disappear_delay_range", (low, high))

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def disappear_delays(self) -> range:
        """Inclusive range of possible disappear delays."""
        low, high = self.disappear_delay_range
        return range(low, high + 1)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> EngineConfig:
        """
        Build a config from an options mapping.

        Accepts both the camelCase option names used by front ends
        (``visibleRows``, ``matchHighlightDelay``, ``mismatchPenaltyDelay``,
        ``disappearDelayRange``) and the field names themselves.

        Raises:
            ValueError: On unknown option names or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown engine option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
