"""
Streamlit dashboard for the token growth simulator.
"""
