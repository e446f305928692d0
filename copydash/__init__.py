"""A side-scrolling arcade game: jump over spikes, land on blocks and reach the portal."""

__version__ = "0.1.0"
__all__ = ["__version__"]