"""dotman: manage dotfile repositories and link them into ~/.config."""

__version__ = '0.0.0.dev0'
