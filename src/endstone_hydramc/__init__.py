from .hydramc import HydraMC

__all__ = ["HydraMC"]
