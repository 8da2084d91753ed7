from .plugin import LocalKubernetesProvider

__all__ = ["LocalKubernetesProvider"]
