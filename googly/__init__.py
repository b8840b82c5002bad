"""googly - multi-engine web search from the terminal"""

__version__ = "1.0.0"
