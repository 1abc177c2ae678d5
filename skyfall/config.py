import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

ENV_PREFIX = "SKYFALL_"


@dataclass
class Config:
    tick_rate: float = 10.0      # simulation steps per second
    frame_rate: float = 30.0     # redraws per second
    poll_timeout: float = 0.1    # seconds one input poll may block its worker
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.frame_rate

    def validate(self) -> 'Config':
        for name in ("tick_rate", "frame_rate", "poll_timeout"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        return self

    @classmethod
    def from_env(cls, environ=None) -> 'Config':
        if environ is None:
            load_dotenv()
            environ = os.environ
        cfg = cls()
        for name in ("tick_rate", "frame_rate", "poll_timeout"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None: continue
            try:
                setattr(cfg, name, float(raw))
            except ValueError as e:
                raise ConfigError(f"{ENV_PREFIX}{name.upper()}={raw!r} is not a number") from e
        cfg.log_file = environ.get(ENV_PREFIX + "LOG_FILE", cfg.log_file)
        cfg.log_level = environ.get(ENV_PREFIX + "LOG_LEVEL", cfg.log_level)
        return cfg
