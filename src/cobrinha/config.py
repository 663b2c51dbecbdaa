"""Game and server configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from cobrinha.storage import BEST_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board geometry, speed range and persistence settings.

    Supports JSON serialization so a deployment can pin its settings.
    """

    # Drawing surface
    canvas_width: int = 400
    canvas_height: int = 400
    cell_size: int = 20

    # Ticks per second
    speed: int = 8
    min_speed: int = 1
    max_speed: int = 20

    # Input
    swipe_threshold: int = 20

    # Persistence
    best_key: str = BEST_KEY
    storage_path: str = "cobrinha_storage.json"

    # Food placement RNG; None draws fresh entropy.
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cell_size < 3:
            raise ValueError("cell_size must be at least 3.")
        if self.canvas_width < self.cell_size or self.canvas_height < self.cell_size:
            raise ValueError("Canvas must hold at least one cell.")
        if self.min_speed < 1:
            raise ValueError("min_speed must be at least 1.")
        if not self.min_speed <= self.speed <= self.max_speed:
            raise ValueError("speed must lie between min_speed and max_speed.")
        if self.swipe_threshold < 0:
            raise ValueError("swipe_threshold must be non-negative.")

    @property
    def cols(self) -> int:
        return self.canvas_width // self.cell_size

    @property
    def rows(self) -> int:
        return self.canvas_height // self.cell_size

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
