"""
API Package - FastAPI routes and middleware serving the comics client.
"""
