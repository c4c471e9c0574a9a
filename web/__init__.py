"""Web layer - API views, charts and the Streamlit dashboard."""
