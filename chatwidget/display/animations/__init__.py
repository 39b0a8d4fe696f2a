# display/animations/__init__.py

from .dot_loader import AsyncDotLoader

class DisplayAnimations:
    """Coordinates terminal animation components."""
    def __init__(self, terminal):
        self.terminal = terminal

    def create_dot_loader(self, prompt, no_animation=False):
        """Create and return a dot loader animation."""
        return AsyncDotLoader(self.terminal, prompt, no_animation)


__all__ = ['DisplayAnimations', 'AsyncDotLoader']
