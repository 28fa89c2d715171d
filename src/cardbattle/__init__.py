"""CardBattle: East vs West card battles against a scripted opponent."""

__version__ = "0.1.0"
