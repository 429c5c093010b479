# FILE: pages/2_Admin_Tools.py
import streamlit as st
from rota_core.io import dump_config_yaml
from rota_core.validation import run_self_test

st.title("Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for name, ok in results["tests"]:
        (st.success if ok else st.error)(name)

if "config" in st.session_state:
    st.subheader("Active configuration")
    cfg_yaml = dump_config_yaml(st.session_state.config)
    st.code(cfg_yaml, language="yaml")
    st.download_button("Download rota.yaml", data=cfg_yaml, file_name="rota.yaml")

st.write("Use this page for diagnostics and configurations.")
