from abc import ABC, abstractmethod


class BaseExchangeRateProvider(ABC):
    @abstractmethod
    def get_rate(self, source_currency: str, target_currency: str) -> float | None:
        pass
