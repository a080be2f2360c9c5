from abc import ABC, abstractmethod
from typing import Iterable


class BaseCatalog(ABC):
    """
    Interface (Contrato) que todo catálogo de URLs deve seguir.

    Isso garante que o Flow não precise mudar quando surgir uma nova fonte.
    """

    @abstractmethod
    def list_urls(self) -> Iterable[str]:
        """Return the candidate resource URLs, in listing order.

        The result must be finite and iterable more than once; each new
        iteration reads the source again.
        """
        raise NotImplementedError()
