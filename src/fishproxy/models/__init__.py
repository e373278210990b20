"""Pydantic models dos comandos expostos ao front-end."""
