"""Daily listening mood: Spotify history, SoundStat audio features, element."""

__version__ = "0.1.0"
