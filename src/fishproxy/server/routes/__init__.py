"""Rotas HTTP do host local."""
