# rota_core/config.py
from __future__ import annotations
import logging
import os
from typing import Optional

import yaml

from .models import MAX_GROUPS, RotaConfig

# ===== App defaults =====
DEFAULT_TIME_SLOTS = [
    {"start": "12:00", "end": "12:30"},
    {"start": "12:30", "end": "13:00"},
    {"start": "13:00", "end": "13:30"},
]

DEFAULT_CONFIG = {
    "num_groups": 3,
    "policy": "shift",              # "shift" = day-shifted rotation, "shuffle" = seeded shuffle
    "time_slots": DEFAULT_TIME_SLOTS,
    "export_prefix": "Rota_Schedule",
    "log_level": "INFO",
}

# env var -> config key
ENV_OVERRIDES = {
    "ROTA_NUM_GROUPS": "num_groups",
    "ROTA_POLICY": "policy",
    "ROTA_EXPORT_PREFIX": "export_prefix",
    "ROTA_LOG_LEVEL": "log_level",
}

# ===== Header aliases for participant CSV uploads =====
EMPLOYEE_ALIASES = ["name", "employee", "employees", "participant", "participants",
                    "full name", "staff", "id", "employee id"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def load_config(path: Optional[str] = None, env: Optional[dict] = None) -> RotaConfig:
    """Defaults, then the YAML file (if any), then ROTA_* environment variables."""
    data = dict(DEFAULT_CONFIG)
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data.update(yaml.safe_load(f) or {})
    env = os.environ if env is None else env
    for var, key in ENV_OVERRIDES.items():
        if env.get(var):
            data[key] = env[var]
    return RotaConfig(**data)


def slots_for(config: RotaConfig, num_groups: int) -> list:
    """Time slots padded with 00:00-00:00 or cut down to `num_groups` entries."""
    slots = [s.dict() if hasattr(s, "dict") else dict(s) for s in config.time_slots][:num_groups]
    while len(slots) < num_groups:
        slots.append({"start": "00:00", "end": "00:00"})
    return slots


# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
<style>
:root{
  --surface: rgba(18, 22, 31, 0.78);
  --muted: rgba(24, 30, 44, 0.7);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --accent-h: 210; --accent-s: 90%; --accent-l: 60%;
  --accent: hsl(var(--accent-h), var(--accent-s), var(--accent-l));
  --radius:16px;
  --shadow:0 12px 40px rgba(0,0,0,.35);
}
body, .stApp, .block-container {
  font-family: Inter, system-ui, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
}
.block-container { padding-top: 1rem; max-width: 1200px; }

.card{
  background: var(--surface) !important;
  border:1px solid rgba(255,255,255,.05);
  border-radius:var(--radius);
  box-shadow:var(--shadow);
  padding:14px 18px; margin-bottom:12px;
}
.card h4{ margin:0 0 4px 0; }
.slot{ color: var(--accent); font-weight:600; font-size:14px; }
.small{ color:var(--sub); font-size:12px; }
.chip{
  display:inline-block; margin:2px 4px 2px 0;
  padding:4px 10px;border:1px solid var(--line);
  border-radius:999px;background:var(--muted);
}
</style>
"""
