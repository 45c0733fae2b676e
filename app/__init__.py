"""
Presentation — Streamlit dashboard, Plotly figures, command-line runner.
"""
