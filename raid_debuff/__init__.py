"""
Raid Debuff Chance Calculator.
Chance to land a debuff from Accuracy vs Resistance, with a Streamlit front end.
"""
