"""Fish Proxy: host de comandos que encaminha sintese TTS para a Fish Audio."""

__version__ = "0.1.0"
