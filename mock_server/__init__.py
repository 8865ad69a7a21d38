"""Mock Vaadin bootstrap server used to exercise the extractors over HTTP.

Run locally with: ``uvicorn mock_server.main:app --port 8080``.
"""
