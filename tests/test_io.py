# FILE: tests/test_io.py
import pandas as pd

from rota_core.io import (
    detect_name_col, dump_config_yaml, load_config_yaml, load_participants_csv,
    participants_to_csv_bytes, schedule_to_dataframe,
)
from rota_core.models import Group, RotaConfig

def test_detect_name_col_alias_and_fallback():
    assert detect_name_col(pd.DataFrame(columns=["Shift", "Employee"])) == "Employee"
    assert detect_name_col(pd.DataFrame(columns=["Who", "Shift"])) == "Who"

def test_load_participants_csv_bytes():
    data = b"Name,Team\nBob,A\n Ann ,B\n,C\nBob,D\n"
    assert load_participants_csv(data) == ["Bob", "Ann"]

def test_participants_csv_reloads():
    assert load_participants_csv(participants_to_csv_bytes(["Ann", "Bob"])) == ["Ann", "Bob"]

def test_schedule_to_dataframe():
    df = schedule_to_dataframe([Group(id=1, employees=["Ann"]), Group(id=2, employees=["Bob"])],
                               [{"start": "12:00", "end": "12:30"}])
    assert list(df.columns) == ["group", "start", "end", "participant"]
    assert df.iloc[0].tolist() == [1, "12:00", "12:30", "Ann"]
    assert df.iloc[1].tolist() == [2, "", "", "Bob"]

def test_config_yaml(tmp_path):
    cfg = RotaConfig(num_groups=4, policy="shuffle", time_slots=[{"start": "09:00", "end": "09:15"}])
    path = tmp_path / "rota.yaml"
    path.write_text(dump_config_yaml(cfg), encoding="utf-8")
    loaded = load_config_yaml(str(path))
    assert loaded.num_groups == 4
    assert loaded.policy == "shuffle"
    assert loaded.time_slots[0].start == "09:00"
