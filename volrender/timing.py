"""Moving average of recent frame durations."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_NO_DURATIONS = 30


@dataclass
class Timing:
    """Keeps the most recent durations and a filtered (averaged) duration.

    ``durations`` holds the recorded values, newest first. ``count`` grows
    by one with every duration added, up to :data:`MAX_NO_DURATIONS`.
    """

    name: str = ""
    durations: list[float] = field(default_factory=list)
    count: int = 0
    filtered_duration: float = 0.0

    def __post_init__(self) -> None:
        if self.name:
            print(self.name, end="")

    def add_duration(self, duration: float) -> None:
        """Record ``duration`` and update the filtered duration.

        The filtered duration is the mean of the newest ``count`` values
        (counted before this call), the new one included; on the very first
        call it is the duration itself.
        """
        window = self.count
        kept = self.durations[: max(window - 1, 0)]
        self.filtered_duration = (duration + sum(kept)) / max(window, 1)
        self.durations = [duration, *kept]
        self.count = min(MAX_NO_DURATIONS, self.count + 1)