# rota_core/io.py
from __future__ import annotations
import io
from typing import List, Sequence

import pandas as pd
import yaml

from .config import EMPLOYEE_ALIASES
from .models import Group, RotaConfig
from .roster import parse_participants


def detect_name_col(df: pd.DataFrame) -> str:
    """Column holding participant names: first alias match, else the first column."""
    if len(df.columns) == 0:
        raise ValueError("CSV has no columns.")
    for c in df.columns:
        if str(c).strip().lower() in EMPLOYEE_ALIASES:
            return c
    return df.columns[0]


def load_participants_csv(file_like) -> List[str]:
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    df = pd.read_csv(file_like, dtype=str, keep_default_na=False)
    col = detect_name_col(df)
    return parse_participants("\n".join(df[col].astype(str).tolist()))


def participants_to_csv_bytes(participants: Sequence[str]) -> bytes:
    buf = io.StringIO()
    pd.DataFrame({"name": list(participants)}).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def schedule_to_dataframe(groups: Sequence[Group], time_slots: Sequence[dict]) -> pd.DataFrame:
    rows = []
    for g in groups:
        slot = time_slots[g.id - 1] if g.id - 1 < len(time_slots) else {}
        for name in g.employees:
            rows.append({
                "group": g.id,
                "start": slot.get("start", ""),
                "end": slot.get("end", ""),
                "participant": name,
            })
    return pd.DataFrame(rows, columns=["group", "start", "end", "participant"])


def load_config_yaml(path: str) -> RotaConfig:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError("Config file must contain a mapping.")
    return RotaConfig(**obj)


def dump_config_yaml(config: RotaConfig) -> str:
    return yaml.safe_dump(config.dict(), sort_keys=False)
