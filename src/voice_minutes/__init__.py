"""voice-minutes — continuous speech recognition into an editable, durable transcript."""

__version__ = '0.1.0'
