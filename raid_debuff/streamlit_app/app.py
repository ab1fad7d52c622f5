"""
Raid Debuff Chance Calculator - Streamlit Web App
Enter Accuracy and Resistance to see the chance a debuff lands.

Run with: streamlit run raid_debuff/streamlit_app/app.py
"""
import streamlit as st

from raid_debuff.core import (
    CURVE_DOMAIN_MAX,
    CURVE_DOMAIN_MIN,
    VARIANT_DEFAULTS,
    VARIANT_DISPLAY_NAMES,
    DebuffModel,
    SigmoidVariant,
    calibration_summary,
    chance_for_stats,
    create_model,
    format_chance,
    format_difference,
)
from raid_debuff.inputs import (
    FIELD_DISPLAY_NAMES,
    STAT_FIELDS,
    CalculatorState,
    apply_edit,
    reset,
)
from raid_debuff.streamlit_app.utils.curve_chart import create_debuff_curve_chart
from raid_debuff.streamlit_app.utils.settings import get_default_variant

SOURCE_URL = "https://www.youtube.com/watch?v=iMmATDScbb0"

# Step / format for the parameter override inputs
PARAM_STEPS = {
    "min_cap": 0.01,
    "max_cap": 0.01,
    "midpoint": 1.0,
    "steepness": 0.001,
    "amplitude": 0.01,
    "offset": 0.001,
    "scale": 0.1,
}

# Page config
st.set_page_config(
    page_title="Raid Debuff Chance Calculator",
    page_icon="🎯",
    layout="wide",
)


def _input_key(field_name: str) -> str:
    return f"{field_name}_input"


def _stat_text(value: float) -> str:
    """Text shown in a stat box, without a trailing .0 for whole numbers."""
    return str(int(value)) if float(value).is_integer() else str(value)


def init_session_state():
    """Initialize session state variables."""
    if 'calculator' not in st.session_state:
        st.session_state.calculator = CalculatorState()
    state = st.session_state.calculator
    for field_name in STAT_FIELDS:
        key = _input_key(field_name)
        if key not in st.session_state:
            st.session_state[key] = _stat_text(getattr(state, field_name))


def _on_stat_change(field_name: str):
    """Apply a text edit. Rejected edits put the last valid value back in the box."""
    state = st.session_state.calculator
    key = _input_key(field_name)
    if not apply_edit(state, field_name, st.session_state[key]):
        st.session_state[key] = _stat_text(getattr(state, field_name))


def _on_reset():
    state = st.session_state.calculator
    reset(state)
    for field_name in STAT_FIELDS:
        st.session_state[_input_key(field_name)] = _stat_text(getattr(state, field_name))


def model_sidebar() -> DebuffModel:
    """Variant picker and parameter overrides. Returns the model to use."""
    with st.sidebar:
        st.markdown("### Curve")
        variants = list(SigmoidVariant)
        variant = st.selectbox(
            "Formula",
            variants,
            index=variants.index(get_default_variant()),
            format_func=lambda v: VARIANT_DISPLAY_NAMES[v],
            key="variant",
        )

        overrides = {}
        with st.expander("🔧 Calibration Parameters"):
            for name, default in VARIANT_DEFAULTS[variant].items():
                overrides[name] = st.number_input(
                    name.replace("_", " ").title(),
                    value=float(default),
                    step=PARAM_STEPS.get(name, 0.01),
                    format="%.4f",
                    key=f"param_{variant.value}_{name}",
                )

        try:
            model = create_model(variant, **overrides)
        except ValueError as e:
            st.error(f"Invalid parameters: {e}. Using defaults.")
            model = create_model(variant)

        active = ", ".join(f"{name}={value:g}" for name, value in model.parameters().items())
        st.caption(f"Active: {VARIANT_DISPLAY_NAMES[model.variant]} ({active})")

    return model


def calculator_section(model: DebuffModel):
    """Accuracy / Resistance form and the resulting chance."""
    state = st.session_state.calculator

    st.subheader("Calculate Chance")

    cols = st.columns(len(STAT_FIELDS))
    for col, field_name in zip(cols, STAT_FIELDS):
        with col:
            st.text_input(
                FIELD_DISPLAY_NAMES[field_name],
                key=_input_key(field_name),
                on_change=_on_stat_change,
                args=(field_name,),
            )

    if not state.is_valid:
        for message in state.errors.values():
            st.warning(message)

    chance = chance_for_stats(model, state.accuracy, state.resistance)

    result_cols = st.columns(2)
    with result_cols[0]:
        st.metric("Accuracy - Resistance", format_difference(state.difference))
    with result_cols[1]:
        st.metric("Chance to apply debuff", format_chance(chance))

    st.button("↺ Reset to defaults", on_click=_on_reset)


def key_points_section(model: DebuffModel):
    """Calibration points of the active curve."""
    st.subheader("Key Points")
    for point in calibration_summary(model):
        st.markdown(f"- {point['label']} **{point['value']}**")


def required_accuracy_section(model: DebuffModel):
    """How much Accuracy is needed for a target chance against the current Resistance."""
    state = st.session_state.calculator

    with st.expander("🎯 Accuracy Needed"):
        target = st.number_input(
            "Target chance (%)",
            min_value=0.0,
            max_value=100.0,
            value=50.0,
            step=1.0,
            key="target_chance",
        )
        try:
            needed_diff = model.required_difference(target)
        except ValueError as e:
            st.info(str(e))
            return

        needed_accuracy = state.resistance + needed_diff
        st.metric(
            f"Accuracy for {format_chance(target)} vs {state.resistance:g} Resistance",
            format_difference(needed_accuracy),
        )
        st.caption(f"Requires Accuracy - Resistance ≥ {format_difference(needed_diff)}")


def chart_section(model: DebuffModel):
    """Success rate chart with the current input marked."""
    state = st.session_state.calculator
    chance = chance_for_stats(model, state.accuracy, state.resistance)

    st.subheader("Success Rate Chart")
    fig = create_debuff_curve_chart(model, state.difference, chance)
    st.plotly_chart(fig, width="stretch")

    if not (CURVE_DOMAIN_MIN <= state.difference <= CURVE_DOMAIN_MAX):
        st.caption(
            f"Your difference ({format_difference(state.difference)}) is outside the plotted range."
        )


def main():
    """Main entry point."""
    init_session_state()

    st.title("🎯 Raid: Debuff Chance Calculator")

    model = model_sidebar()

    col1, col2 = st.columns([2, 1])
    with col1:
        calculator_section(model)
    with col2:
        key_points_section(model)
        required_accuracy_section(model)

    st.divider()
    chart_section(model)

    st.divider()
    st.caption(f"Based on information found in this video {SOURCE_URL}")


if __name__ == "__main__":
    main()
