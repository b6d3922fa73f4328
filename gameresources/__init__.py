"""Caching managers for pygame game images, fonts, audio, JSON and custom data."""

__version__ = "0.1.0"
__all__ = ["audio", "custom", "fonts", "images", "jsoncache", "manager"]