"""
config.py — Application Settings
==================================
Defaults for the web app, each overridable from the environment:

    SORTVIZ_ARRAY_SIZE      initial / default array size        (50)
    SORTVIZ_MAX_ARRAY_SIZE  upper bound accepted by the API     (200)
    SORTVIZ_CANVAS_WIDTH    canvas width in pixels              (800)
    SORTVIZ_CANVAS_HEIGHT   canvas height in pixels             (400)
    SORTVIZ_SPEED           initial speed slider value, 1..100  (55)
    SORTVIZ_SEED            RNG seed for reproducible arrays    (unset)
    SORTVIZ_LOG_LEVEL       debug / info / warning / …          (info)
    SORTVIZ_LOG_JSON        "1" for JSON log lines              (0)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class AppConfig:
    array_size:     int           = 50
    max_array_size: int           = 200
    canvas_width:   int           = 800
    canvas_height:  int           = 400
    speed:          float         = 55
    seed:           Optional[int] = None
    log_level:      str           = "info"
    log_json:       bool          = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env
        seed = env.get("SORTVIZ_SEED")
        return cls(
            array_size=int(env.get("SORTVIZ_ARRAY_SIZE", cls.array_size)),
            max_array_size=int(env.get("SORTVIZ_MAX_ARRAY_SIZE", cls.max_array_size)),
            canvas_width=int(env.get("SORTVIZ_CANVAS_WIDTH", cls.canvas_width)),
            canvas_height=int(env.get("SORTVIZ_CANVAS_HEIGHT", cls.canvas_height)),
            speed=float(env.get("SORTVIZ_SPEED", cls.speed)),
            seed=int(seed) if seed else None,
            log_level=env.get("SORTVIZ_LOG_LEVEL", cls.log_level),
            log_json=env.get("SORTVIZ_LOG_JSON", "0").lower() in ("1", "true", "yes"),
        )
