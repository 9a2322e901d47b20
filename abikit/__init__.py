"""Contract ABI types, token encoding, constructor calls, event signatures and topic filters."""

__version__ = "0.1.0"

__all__ = ["constructor", "encoder", "errors", "event", "event_param", "tokens"]