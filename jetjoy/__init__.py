"""A side-scrolling jetpack arcade game: game logic plus a pygame front end."""

__version__ = "0.1.0"