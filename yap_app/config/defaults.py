"""Default configuration parameters for the pomodoro timer."""

from dataclasses import dataclass

MINUTE_MS = 60 * 1000


@dataclass(frozen=True)
class TimerParams:
    """Interval lengths and long break cadence."""
    work_minutes: int = 25                  # Pomodoro length
    short_break_minutes: int = 5            # Regular break
    long_break_minutes: int = 15            # Every Nth break
    long_break_every: int = 8               # Counter modulus for long breaks

    @property
    def work_ms(self) -> int:
        return self.work_minutes * MINUTE_MS

    @property
    def short_break_ms(self) -> int:
        return self.short_break_minutes * MINUTE_MS

    @property
    def long_break_ms(self) -> int:
        return self.long_break_minutes * MINUTE_MS


@dataclass(frozen=True)
class StorageParams:
    """State file location and locking."""
    path: str = "~/.yap"
    lock: bool = True


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic output settings."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    timer: TimerParams
    storage: StorageParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        timer=TimerParams(),
        storage=StorageParams(),
        logging=LoggingParams(),
    )
