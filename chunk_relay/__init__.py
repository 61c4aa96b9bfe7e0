"""
Live translation relay built with FastAPI, exposing
- an endpoint that accepts short audio chunks,
- forwards each one to a remote speech translation service,
- and returns the translated text with a URL to a synthesized audio artifact.
"""

__version__ = "0.1.0"
