"""Generators for robots.txt and llms.txt."""

from visibility.generators.llms import ContactInfo, LLMSConfig, LLMSPage, LLMSTextGenerator
from visibility.generators.robots import DEFAULT_DISALLOW, RobotsConfig, RobotsGenerator

__all__ = [
    "ContactInfo",
    "DEFAULT_DISALLOW",
    "LLMSConfig",
    "LLMSPage",
    "LLMSTextGenerator",
    "RobotsConfig",
    "RobotsGenerator",
]
