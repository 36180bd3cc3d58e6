"""Storage module — load target files (creating from defaults) and save them back."""

from splice_engine.storage.loader import load_buffer, read_text, save_buffer

__all__ = ["load_buffer", "read_text", "save_buffer"]
