"""
App settings read from Streamlit secrets or environment variables.

Settings:
    RAID_DEBUFF_VARIANT - default curve variant ("calibrated" or "uncapped")
"""
import logging
import os

from raid_debuff.core import SigmoidVariant, variant_from_string

VARIANT_SETTING = "RAID_DEBUFF_VARIANT"


def get_setting(name: str, default: str = "") -> str:
    """Get a setting from Streamlit secrets, falling back to the environment."""
    try:
        import streamlit as st
        return st.secrets.get(name, os.environ.get(name, default))
    except Exception:
        # No secrets.toml or not running under Streamlit
        return os.environ.get(name, default)


def get_default_variant() -> SigmoidVariant:
    """Variant selected by RAID_DEBUFF_VARIANT, CALIBRATED if unset or unknown."""
    value = get_setting(VARIANT_SETTING, "")
    if not value:
        return SigmoidVariant.CALIBRATED
    try:
        return variant_from_string(value)
    except ValueError as e:
        logging.warning(f"{VARIANT_SETTING}: {e}. Using calibrated.")
        return SigmoidVariant.CALIBRATED
