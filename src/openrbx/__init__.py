"""openrbx - Open Roblox Studio places from the command line."""

__version__ = "1.0.0"
