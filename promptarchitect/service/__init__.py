"""
Prompt Architect - SERVICE
FastAPI app exposing the core over HTTP
"""
