"""Configuration dataclasses for the Call Center Analytics Dashboard."""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class BackendConfig:
    """Connection settings for the hosted Supabase backend."""
    url: str = field(default_factory=lambda: os.environ.get("SUPABASE_URL", ""))
    key: str = field(default_factory=lambda: os.environ.get("SUPABASE_KEY", ""))
    disabled: bool = field(default_factory=lambda: _env_flag("SUPABASE_DISABLE"))
    snapshot_max_age: int = 900  # seconds

    # Tables read by the dashboard
    call_trends_table: str = "call_trends"
    dashboard_stats_table: str = "dashboard_stats"
    executive_performance_table: str = "executive_performance"
    sentiment_distribution_table: str = "sentiment_distribution"
    init_function: str = "initialize-chart-data"

    # Tables offered to the custom chart builder
    builder_tables: list[str] = field(default_factory=lambda: ["call_data", "calls", "user"])

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.key) and not self.disabled


@dataclass
class AppConfig:
    """Top-level application configuration."""
    project_root: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)
    cache_dir: Path = field(default=None)
    backend: BackendConfig = field(default_factory=BackendConfig)

    seed: int = field(default_factory=lambda: int(os.environ.get("CALLCENTER_SEED", "42")))
    calls_per_executive: int = 30
    sla_target: float = 90.0
    top_n_chart_rows: int = 10

    def __post_init__(self):
        if self.cache_dir is None:
            env_dir = os.environ.get("CALLCENTER_CACHE_DIR")
            self.cache_dir = Path(env_dir) if env_dir else self.project_root / "cache"
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def cache_path(self, filename: str) -> Path:
        return self.cache_dir / filename

    def snapshot_path(self, table: str) -> Path:
        """Parquet snapshot file for a backend table."""
        return self.cache_path(f"{table}.parquet")
