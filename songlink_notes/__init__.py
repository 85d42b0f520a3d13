"""
SongLink Notes: turn a music track URL into an Obsidian note via song.link
"""

__version__ = "0.1.0"
