"""Interface abstraite pour le puits de diagnostics du store."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    Le store, le parser et le writer ne connaissent que cette interface :
    l'application hôte choisit où partent les événements.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass

    def log_debug(self, message: str) -> None:
        """Log un message de debug (ignoré par défaut)."""
        pass
